"""Exception types raised by wedlock."""

from __future__ import annotations

from pathlib import Path


class WedlockError(Exception):
    """Base class for wedlock errors."""


class StreamOpenError(WedlockError):
    """An output stream could not be opened; the whole run must abort."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to open {path}: {reason}")


class DumpLoadError(WedlockError):
    """A machine-function dump could not be read or validated."""
