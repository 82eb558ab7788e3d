"""Rewrite a text file in place: read it, rewind, write it back with a suffix, print it."""

from roundtrip.content import SUFFIX, build_content
from roundtrip.errors import OpenError, ReadError, RoundTripError, SeekError, WriteError
from roundtrip.fs import TextFile, open_file
from roundtrip.script import round_trip, run

__version__ = "0.1.0"

__all__ = [
    "OpenError",
    "ReadError",
    "RoundTripError",
    "SUFFIX",
    "SeekError",
    "TextFile",
    "WriteError",
    "build_content",
    "open_file",
    "round_trip",
    "run",
]
