"""Shared fixtures: small fortune files written into a temporary directory."""

from __future__ import annotations

from pathlib import Path

import pytest

from fortune_data import JOKES, QUOTES, fortune_file_text


@pytest.fixture
def inputs_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "inputs"
    directory.mkdir()
    (directory / "jokes").write_text(fortune_file_text(JOKES))
    (directory / "quotes").write_text(fortune_file_text(QUOTES))
    return directory
