"""Configuration management using pydantic-settings."""

from .settings import LogcaseSettings, clear_settings_cache, get_settings

__all__ = ["LogcaseSettings", "clear_settings_cache", "get_settings"]
