"""Runtime settings read from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from studytrack.logging import get_logger


DEFAULT_PORT = 4000
DEFAULT_HOST = "0.0.0.0"

_TRUTHY = {"1", "true", "yes", "y", "on"}


def _is_truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


def _parse_csv_list(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def _normalize_raw(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _parse_port(raw: str | None) -> int:
    value = _normalize_raw(raw)
    if value is None:
        return DEFAULT_PORT
    try:
        port = int(value)
    except ValueError:
        port = -1
    if not 1 <= port <= 65535:
        get_logger(__name__).warning(
            "Ignoring invalid PORT value %r; using %s", value, DEFAULT_PORT
        )
        return DEFAULT_PORT
    return port


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    public_dir: Path = field(default_factory=lambda: Path.cwd() / "public")
    cors_origins: tuple[str, ...] = ("*",)
    cors_allow_credentials: bool = False


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from ``env`` (defaults to ``os.environ``).

    ``PORT`` keeps its conventional unprefixed name so hosting platforms can
    inject it; everything else lives under ``STUDYTRACK_``.
    """

    if env is None:
        env = os.environ

    public_raw = _normalize_raw(env.get("STUDYTRACK_PUBLIC_DIR"))
    public_dir = Path(public_raw).expanduser() if public_raw else Path.cwd() / "public"

    origins = _parse_csv_list(env.get("STUDYTRACK_CORS_ORIGINS")) or ["*"]

    return Settings(
        host=_normalize_raw(env.get("STUDYTRACK_HOST")) or DEFAULT_HOST,
        port=_parse_port(env.get("PORT")),
        public_dir=public_dir,
        cors_origins=tuple(origins),
        cors_allow_credentials=_is_truthy(env.get("STUDYTRACK_CORS_ALLOW_CREDENTIALS")),
    )
