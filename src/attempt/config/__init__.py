"""Configuration management using pydantic-settings."""

from .settings import AttemptSettings, clear_settings_cache, get_settings

__all__ = ["AttemptSettings", "clear_settings_cache", "get_settings"]
