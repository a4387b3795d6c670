"""Tests for environment-driven settings and logging setup."""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path

import pytest

from moonsugar.config import (
    MoonsugarSettings,
    clear_settings_cache,
    configure_logging,
    get_settings,
)


@pytest.fixture(autouse=True)
def fresh_settings() -> object:
    """Reset cached settings and the moonsugar logger around each test."""
    clear_settings_cache()
    logger = logging.getLogger("moonsugar")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    clear_settings_cache()


def test_defaults() -> None:
    """Defaults are quiet and do not store tracebacks."""
    settings = get_settings()
    assert settings.debug is False
    assert settings.logging.level == "WARNING"
    assert settings.logging.format == "text"
    assert settings.attempt.log_captured is True
    assert settings.attempt.include_traceback is False
    assert settings.effective_log_level == "WARNING"


def test_settings_cached() -> None:
    """get_settings returns one instance until cleared."""
    assert get_settings() is get_settings()
    first = get_settings()
    clear_settings_cache()
    assert get_settings() is not first


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """MOONSUGAR_* variables populate nested settings."""
    monkeypatch.setenv("MOONSUGAR_LOG_LEVEL", "info")
    monkeypatch.setenv("MOONSUGAR_LOG_FORMAT", "json")
    monkeypatch.setenv("MOONSUGAR_ATTEMPT_INCLUDE_TRACEBACK", "1")
    settings = get_settings()
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "json"
    assert settings.attempt.include_traceback is True


def test_dotenv_populates_nested_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """A .env file in the working directory configures the log and attempt sections."""
    monkeypatch.delenv("MOONSUGAR_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MOONSUGAR_ATTEMPT_INCLUDE_TRACEBACK", raising=False)
    (tmp_path / ".env").write_text(
        "MOONSUGAR_LOG_LEVEL=ERROR\nMOONSUGAR_ATTEMPT_INCLUDE_TRACEBACK=true\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    settings = get_settings()
    assert settings.logging.level == "ERROR"
    assert settings.attempt.include_traceback is True


def test_debug_forces_debug_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """MOONSUGAR_DEBUG overrides the configured level."""
    monkeypatch.setenv("MOONSUGAR_DEBUG", "true")
    assert get_settings().effective_log_level == "DEBUG"


def test_invalid_level_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unknown levels fail validation."""
    monkeypatch.setenv("MOONSUGAR_LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError):
        MoonsugarSettings()


def test_configure_logging_text() -> None:
    """Text handler writes level, logger name and message."""
    stream = io.StringIO()
    logger = configure_logging(MoonsugarSettings(debug=True), output=stream)
    logging.getLogger("moonsugar.result").debug("hello %s", "there")
    assert logger.level == logging.DEBUG
    assert "[DEBUG] moonsugar.result: hello there" in stream.getvalue()


def test_configure_logging_json(monkeypatch: pytest.MonkeyPatch) -> None:
    """JSON handler emits one object per line."""
    monkeypatch.setenv("MOONSUGAR_LOG_FORMAT", "json")
    monkeypatch.setenv("MOONSUGAR_LOG_LEVEL", "INFO")
    stream = io.StringIO()
    configure_logging(output=stream)
    logging.getLogger("moonsugar.validation").info("checked")
    record = json.loads(stream.getvalue().strip())
    assert record["level"] == "info"
    assert record["logger"] == "moonsugar.validation"
    assert record["event"] == "checked"


def test_configure_logging_idempotent() -> None:
    """Repeated calls replace the handler instead of stacking them."""
    logger = logging.getLogger("moonsugar")
    before = len(logger.handlers)
    configure_logging(MoonsugarSettings(), output=io.StringIO())
    configure_logging(MoonsugarSettings(), output=io.StringIO())
    assert len(logger.handlers) == before + 1
