"""Builds the content written back into the file."""

from __future__ import annotations

SUFFIX = "\n hello world"


def build_content(text: str, suffix: str = SUFFIX) -> str:
    """Return text with suffix appended. Pure; no I/O."""
    return text + suffix
