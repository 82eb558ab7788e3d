"""Shared fixtures: file handles whose OS calls fail."""

from __future__ import annotations

import errno
from pathlib import Path

import aiofiles
import pytest


class FailingHandle:
    """Stands in for an aiofiles text handle; the named methods raise OSError."""

    def __init__(self, content: str, failing: set[str], err: int) -> None:
        self._content = content
        self._failing = failing
        self._err = err
        self.closed = False

    def _maybe_fail(self, name: str) -> None:
        if name in self._failing:
            raise OSError(self._err, f"{errno.errorcode[self._err]} in {name}")

    async def seek(self, pos: int) -> int:
        self._maybe_fail("seek")
        return pos

    async def read(self) -> str:
        self._maybe_fail("read")
        return self._content

    async def write(self, text: str) -> int:
        self._maybe_fail("write")
        return len(text)

    async def flush(self) -> None:
        self._maybe_fail("flush")

    async def close(self) -> None:
        self.closed = True
        self._maybe_fail("close")


@pytest.fixture
def failing_open(monkeypatch: pytest.MonkeyPatch):
    """
    Patch aiofiles.open so every open returns a FailingHandle.
    Call with the method names that should fail; returns the list of handed-out handles.
    """

    def install(*failing: str, content: str = "abc", err: int = errno.ENOSPC) -> list[FailingHandle]:
        handles: list[FailingHandle] = []

        async def fake_open(path: Path | str, *args: object, **kwargs: object) -> FailingHandle:
            handle = FailingHandle(content, set(failing), err)
            handles.append(handle)
            return handle

        monkeypatch.setattr(aiofiles, "open", fake_open)
        return handles

    return install
