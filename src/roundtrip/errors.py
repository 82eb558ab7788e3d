"""Errors raised by the file round-trip, one per I/O step."""

from __future__ import annotations

from pathlib import Path


class RoundTripError(Exception):
    """Base class. Carries the path of the file being rewritten."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class OpenError(RoundTripError):
    """File missing, not a regular file, or not readable and writable."""


class ReadError(RoundTripError):
    """I/O or decode failure while reading content."""


class SeekError(RoundTripError):
    """Invalid offset or closed handle."""


class WriteError(RoundTripError):
    """I/O failure while writing (disk full, permission denied, closed handle)."""
