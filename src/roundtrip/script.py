"""The round-trip: open, read, rewind, write content plus suffix, read again, print."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

from roundtrip.config import load_config, literal_target, script_relative_target
from roundtrip.content import build_content
from roundtrip.errors import RoundTripError
from roundtrip.fs import open_file

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(config_path: Path | None = None) -> None:
    """
    Configure the roundtrip logger: level from config, stderr console handler,
    optional file handler from config. Stdout is reserved for file content.
    """
    log_cfg = load_config(config_path).get("logging") or {}
    package_logger = logging.getLogger("roundtrip")
    package_logger.setLevel(getattr(logging, str(log_cfg.get("level") or "INFO").upper(), logging.INFO))
    if package_logger.handlers:
        return

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    log_file = log_cfg.get("file")
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
        except OSError:
            log_file = None
    fmt = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(fmt)
        package_logger.addHandler(handler)
    if log_cfg.get("file") and not log_file:
        logger.warning("Cannot open log file %s; logging to stderr only", log_cfg["file"])


async def round_trip(path: Path | str) -> str:
    """
    Rewrite the file at path in place and return its content afterwards.

    The new content is written from offset 0 without truncating, so it
    overwrites the old bytes and grows the file when longer. Any error
    aborts the sequence; nothing is retried.
    """
    path = Path(path)
    async with open_file(path) as f:
        original = await f.content()
        logger.debug("Read %d chars from %s", len(original), path.as_posix())
        await f.seek(0)
        written = await f.write(build_content(original))
        logger.debug("Wrote %d bytes to %s", written, path.as_posix())
        return await f.content()


def run(path: Path | str) -> str:
    """Synchronous wrapper around round_trip."""
    return asyncio.run(round_trip(path))


def main(target: Path | str | None = None) -> None:
    """Round-trip text.txt next to this package (or target) and print the result."""
    setup_logging()
    path = Path(target) if target is not None else script_relative_target()
    try:
        final = run(path)
    except RoundTripError as e:
        logger.debug("Round-trip failed for %s", path.as_posix(), exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(final)


def main_cwd() -> None:
    """Round-trip ./text.txt in the current working directory."""
    main(literal_target())
