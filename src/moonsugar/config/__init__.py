"""Configuration management using pydantic-settings, plus logging setup."""

from .logging import JsonFormatter, configure_logging
from .settings import (
    AttemptSettings,
    LoggingSettings,
    MoonsugarSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "AttemptSettings",
    "JsonFormatter",
    "LoggingSettings",
    "MoonsugarSettings",
    "clear_settings_cache",
    "configure_logging",
    "get_settings",
]
