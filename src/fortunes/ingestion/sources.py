"""Line-readable sources: regular files and standard input."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Iterator, Optional, Protocol, Type

from fortunes.utils.files import STDIN_SENTINEL


def decode_lines(handle: BinaryIO) -> Iterator[str]:
    """Yield UTF-8 lines without terminators, dropping lines that fail to decode."""
    for raw in handle:
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError:
            continue
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        yield line


class LineSource(Protocol):
    """A sequential, line-readable resource."""

    name: str

    def lines(self) -> Iterator[str]: ...

    def close(self) -> None: ...

    def __enter__(self) -> "LineSource": ...

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None: ...


class _BaseLineSource:
    name: str
    _handle: BinaryIO

    def lines(self) -> Iterator[str]:
        return decode_lines(self._handle)

    def close(self) -> None:
        raise NotImplementedError

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class FileLineSource(_BaseLineSource):
    """Reads lines from a file; opening happens eagerly so errors surface early."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self.name = self.path.name
        self._handle = self.path.open("rb")

    def close(self) -> None:
        self._handle.close()


class StdinLineSource(_BaseLineSource):
    """Reads lines from standard input without closing it."""

    def __init__(self, stream: Optional[BinaryIO] = None) -> None:
        self.name = STDIN_SENTINEL
        self._handle = stream if stream is not None else sys.stdin.buffer

    def close(self) -> None:
        """Standard input belongs to the process and stays open."""


def open_line_source(path: str | os.PathLike[str]) -> LineSource:
    """Open the stdin adapter for ``-`` and a file adapter for anything else."""
    if os.fspath(path) == STDIN_SENTINEL:
        return StdinLineSource()
    return FileLineSource(path)
