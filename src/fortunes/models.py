"""Core fortunes data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Fortune:
    """A single delimiter-bounded record and the file it came from."""

    source: str
    text: str
