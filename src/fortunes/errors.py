"""Exception types raised by the fortunes engine."""

from __future__ import annotations


class FortuneError(Exception):
    """Base class for errors that abort a run."""


class ConfigError(FortuneError):
    """Invalid user-supplied configuration (pattern or seed)."""


class DiscoveryError(FortuneError):
    """A top-level source path could not be inspected."""

    def __init__(self, path: str, error: OSError) -> None:
        self.path = path
        self.error = error
        reason = error.strerror or str(error)
        super().__init__(f"{path}: {reason}")
