"""Parsing of ``%``-delimited fortune files."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator, Sequence

from fortunes.ingestion.sources import open_line_source
from fortunes.models import Fortune

LOGGER = logging.getLogger(__name__)

DELIMITER = "%"


def parse_lines(lines: Iterable[str], source: str) -> Iterator[Fortune]:
    """Split lines into fortunes at delimiter lines.

    Text after the last delimiter is never emitted.
    """
    buffer: list[str] = []
    for line in lines:
        if line == DELIMITER:
            if buffer:
                yield Fortune(source=source, text="\n".join(buffer))
                buffer = []
            continue
        buffer.append(line)


def read_fortunes(paths: Sequence[str | os.PathLike[str]]) -> list[Fortune]:
    """Parse every path in order; files that cannot be opened are skipped."""
    fortunes: list[Fortune] = []
    for path in paths:
        try:
            handle = open_line_source(path)
        except OSError as exc:
            LOGGER.error("%s: %s", path, exc.strerror or exc)
            continue
        with handle:
            fortunes.extend(parse_lines(handle.lines(), handle.name))
    LOGGER.debug("Parsed %d fortunes from %d files", len(fortunes), len(paths))
    return fortunes
