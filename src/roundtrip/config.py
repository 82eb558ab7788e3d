"""Configuration: target file location, constants, and logging config loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

TARGET_FILENAME = "text.txt"
LITERAL_TARGET = "./" + TARGET_FILENAME
CONFIG_FILENAME = "config.json"

# Default script for the script-relative variant: the module that runs the round-trip
_SCRIPT = Path(__file__).resolve().parent / "script.py"


def global_config_path() -> Path:
    """~/.roundtrip/config.json; read at every load so HOME changes are seen."""
    return Path.home() / ".roundtrip" / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    return {
        "logging": {
            "level": "INFO",
            "file": None,
        },
    }


def _load_json(path: Path) -> dict[str, Any] | None:
    """Load JSON from path; return None if file missing or invalid."""
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Defaults overlaid with path (default: the global config). Only logging is configurable."""
    merged = default_config()
    overrides = _load_json(path or global_config_path())
    if overrides:
        _deep_merge(merged, overrides)
    return merged


def literal_target() -> Path:
    """./text.txt, resolved against the process working directory when opened."""
    return Path(LITERAL_TARGET)


def script_relative_target(script: Path | str | None = None) -> Path:
    """
    text.txt next to the given script (default: this package's script module).
    Absolute, so the file is found regardless of the working directory.
    """
    script_path = Path(script).resolve() if script is not None else _SCRIPT
    return script_path.parent / TARGET_FILENAME
