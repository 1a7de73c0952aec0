from .settings import DEFAULT_HOST, DEFAULT_PORT, Settings, load_settings

__all__ = ["DEFAULT_HOST", "DEFAULT_PORT", "Settings", "load_settings"]
