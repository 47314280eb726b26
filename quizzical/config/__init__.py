"""Application configuration."""

from .settings import LogLevel, Settings, get_settings

__all__ = ["LogLevel", "Settings", "get_settings"]
