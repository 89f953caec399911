"""Run configuration built once from command line input."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from fortunes.errors import ConfigError

MAX_SEED = 2**64 - 1


@dataclass(frozen=True, slots=True)
class FortuneConfig:
    sources: tuple[str, ...]
    pattern: re.Pattern[str] | None = None
    seed: int | None = None


def compile_pattern(value: str, *, insensitive: bool = False) -> re.Pattern[str]:
    """Compile a search pattern, reporting bad syntax as a ConfigError."""
    flags = re.IGNORECASE if insensitive else 0
    try:
        return re.compile(value, flags)
    except re.error as exc:
        raise ConfigError(f'Invalid --pattern "{value}"') from exc


def parse_seed(value: str) -> int:
    """Parse an unsigned 64-bit seed."""
    if not (value.isascii() and value.isdigit()):
        raise ConfigError(f'"{value}" not a valid integer')
    seed = int(value)
    if seed > MAX_SEED:
        raise ConfigError(f'"{value}" not a valid integer')
    return seed


def build_config(
    sources: Sequence[str],
    *,
    pattern: Optional[str] = None,
    insensitive: bool = False,
    seed: Optional[str] = None,
) -> FortuneConfig:
    if not sources:
        raise ConfigError("At least one source is required")
    return FortuneConfig(
        sources=tuple(sources),
        pattern=compile_pattern(pattern, insensitive=insensitive) if pattern is not None else None,
        seed=parse_seed(seed) if seed is not None else None,
    )
