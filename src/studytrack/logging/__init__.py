"""Logging helpers shared by the API and the CLI."""

from .logging import get_configured_level, get_logger, reset_logger

__all__ = ["get_configured_level", "get_logger", "reset_logger"]
