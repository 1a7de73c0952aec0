"""Persisted logging level for the studytrack loggers.

The level is kept in a small JSON file so that ``studytrack logging
set-level`` survives restarts of the API server and later CLI runs.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

LEVEL_KEY = "log_level"

ConfigPath = Optional[os.PathLike[str] | str]


def config_path(config_file: ConfigPath = None) -> Path:
    """``config_file`` if given, else ``$STUDYTRACK_LOG_CONFIG``, else ``~/.studytrack/logging.json``."""

    if config_file is not None:
        return Path(config_file)
    raw = os.environ.get("STUDYTRACK_LOG_CONFIG", "").strip()
    if raw:
        return Path(raw).expanduser()
    return Path.home() / ".studytrack" / "logging.json"


def load_config(config_file: ConfigPath = None) -> Dict[str, Any]:
    """Read the config file; a missing, unreadable or non-object file reads as ``{}``."""

    try:
        data = json.loads(config_path(config_file).read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: Dict[str, Any], config_file: ConfigPath = None) -> Path:
    path = config_path(config_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return path


def _level_number(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    number = logging.getLevelName(str(value).strip().upper())
    return number if isinstance(number, int) else None


def load_log_level(config_file: ConfigPath = None) -> Optional[int]:
    """Numeric level saved by :func:`save_log_level`, or ``None``."""

    return _level_number(load_config(config_file).get(LEVEL_KEY))


def save_log_level(level: str | int, config_file: ConfigPath = None) -> Path:
    """Store ``level`` by name and return the config file path.

    Raises
    ------
    ValueError
        If ``level`` is not a known logging level.
    """

    number = _level_number(level)
    if number is None:
        raise ValueError(f"Unknown logging level: {level!r}")
    name = logging.getLevelName(number)
    if not isinstance(name, str) or name.startswith("Level "):
        name = number

    config = load_config(config_file)
    config[LEVEL_KEY] = name
    return save_config(config, config_file)


__all__ = [
    "config_path",
    "load_config",
    "load_log_level",
    "save_config",
    "save_log_level",
]
