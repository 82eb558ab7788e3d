"""Async text file handle: open for read/write, read all, seek, write in place (aiofiles)."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

import aiofiles

from roundtrip.errors import OpenError, ReadError, SeekError, WriteError

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


class TextFile:
    """
    An open text file owned by one caller. Holds the read/write cursor.

    Writes overwrite from the cursor and never truncate: if the new text is
    shorter than what is on disk, the trailing old bytes stay.
    """

    def __init__(self, handle: Any, path: Path) -> None:
        self._handle = handle
        self._path = path
        self._closed = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    async def content(self) -> str:
        """Read the whole file from offset 0. Leaves the cursor at end of file."""
        if self._closed:
            raise ReadError(f"File is closed: {self._path}", self._path)
        try:
            await self._handle.seek(0)
            return await self._handle.read()
        except (OSError, ValueError) as e:
            # UnicodeDecodeError is a ValueError
            raise ReadError(f"Cannot read {self._path}: {e}", self._path) from e

    async def seek(self, pos: int = 0) -> None:
        """Move the cursor to absolute offset pos. Content is not changed."""
        if pos < 0:
            raise SeekError(f"Negative seek position {pos}: {self._path}", self._path)
        if self._closed:
            raise SeekError(f"File is closed: {self._path}", self._path)
        try:
            await self._handle.seek(pos)
        except (OSError, ValueError) as e:
            raise SeekError(f"Cannot seek {self._path} to {pos}: {e}", self._path) from e

    async def write(self, text: str) -> int:
        """Write text at the cursor and flush. Returns the number of bytes written."""
        if self._closed:
            raise WriteError(f"File is closed: {self._path}", self._path)
        try:
            await self._handle.write(text)
            await self._handle.flush()
        except (OSError, ValueError) as e:
            raise WriteError(f"Cannot write {self._path}: {e}", self._path) from e
        return len(text.encode(ENCODING))

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            # Closing flushes any text still buffered
            await self._handle.close()
        except (OSError, ValueError) as e:
            raise WriteError(f"Cannot close {self._path}: {e}", self._path) from e


@asynccontextmanager
async def open_file(path: Path | str) -> AsyncIterator[TextFile]:
    """
    Open an existing file for reading and writing. The file is never created
    or truncated. The handle is closed on exit, including when the body raises.
    """
    path = Path(path)
    try:
        # newline="" keeps "\n" as written on every platform
        handle = await aiofiles.open(path, "r+", encoding=ENCODING, newline="")
    except OSError as e:
        raise OpenError(f"Cannot open {path}: {e.strerror or e}", path) from e
    logger.debug("Opened %s", path.as_posix())
    text_file = TextFile(handle, path)
    try:
        yield text_file
    except BaseException:
        # Keep the error from the body; a failed close here is secondary
        try:
            await text_file.close()
        except WriteError:
            logger.debug("Close of %s failed after an earlier error", path.as_posix(), exc_info=True)
        raise
    await text_file.close()
    logger.debug("Closed %s", path.as_posix())
