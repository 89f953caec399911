"""Utility helpers for resolving fortune source paths."""

from __future__ import annotations

import logging
import os
import stat
from typing import Iterable, Iterator

from fortunes.errors import DiscoveryError

LOGGER = logging.getLogger(__name__)

STDIN_SENTINEL = "-"


def iter_source_files(root: str) -> Iterator[str]:
    """Yield regular files beneath a directory, spelled relative to ``root``.

    Unreadable directories and entries are skipped. Symbolic links are
    neither followed nor collected.
    """
    for dirpath, _dirnames, filenames in os.walk(root):
        for name in filenames:
            candidate = os.path.join(dirpath, name)
            try:
                info = os.lstat(candidate)
            except OSError as exc:
                LOGGER.debug("Skipping %s: %s", candidate, exc)
                continue
            if stat.S_ISREG(info.st_mode):
                yield candidate


def collect_paths(inputs: Iterable[str | os.PathLike[str]]) -> list[str]:
    """Resolve files and directories into a sorted, deduplicated file list.

    Paths keep the spelling they were given, so ``./b`` sorts before ``a``.
    Any input that cannot be inspected aborts the whole collection with a
    DiscoveryError, even when the remaining inputs are valid.
    """
    found: set[str] = set()
    for item in inputs:
        path = os.fspath(item)
        if path == STDIN_SENTINEL:
            found.add(path)
            continue
        try:
            info = os.stat(path)
        except OSError as exc:
            raise DiscoveryError(path, exc) from exc

        if stat.S_ISREG(info.st_mode):
            found.add(path)
        elif stat.S_ISDIR(info.st_mode):
            found.update(iter_source_files(path))
        else:
            LOGGER.debug("Ignoring %s: not a regular file or directory", path)

    resolved = sorted(found)
    LOGGER.debug("Resolved %d source files", len(resolved))
    return resolved
