"""Environment-based configuration using pydantic-settings.

Example:
    >>> from moonsugar.config import MoonsugarSettings
    >>> MoonsugarSettings(debug=True).effective_log_level
    'DEBUG'

    # Or with environment variables:
    # MOONSUGAR_LOG_LEVEL=DEBUG
    # MOONSUGAR_ATTEMPT_INCLUDE_TRACEBACK=true
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration for the ``moonsugar`` logger tree."""

    model_config = SettingsConfigDict(
        env_prefix="MOONSUGAR_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "text"] = "text"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class AttemptSettings(BaseSettings):
    """Behaviour of the exception-to-result boundary."""

    model_config = SettingsConfigDict(
        env_prefix="MOONSUGAR_ATTEMPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_captured: bool = Field(default=True, description="Log captured exceptions at DEBUG")
    include_traceback: bool = Field(
        default=False,
        description="Store the formatted traceback on CapturedError.details",
    )


class MoonsugarSettings(BaseSettings):
    """Root settings, loaded from ``MOONSUGAR_`` environment variables and ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="MOONSUGAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Force DEBUG logging")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    attempt: AttemptSettings = Field(default_factory=AttemptSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug override."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> MoonsugarSettings:
    """Get the global settings instance (cached)."""
    return MoonsugarSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next ``get_settings()`` rereads the environment."""
    get_settings.cache_clear()
