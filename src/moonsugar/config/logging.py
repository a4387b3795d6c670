"""Logging setup for the ``moonsugar`` logger tree.

Nothing is configured on import; library modules only create named loggers.
Applications that want moonsugar's diagnostics call ``configure_logging()`` once.
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TextIO

import orjson

if TYPE_CHECKING:
    from .settings import MoonsugarSettings

ROOT_LOGGER = "moonsugar"

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_HANDLER_MARK = "_moonsugar_handler"


class JsonFormatter(logging.Formatter):
    """JSON Lines output, one object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str).decode()


def configure_logging(settings: MoonsugarSettings | None = None, *, output: TextIO | None = None) -> logging.Logger:
    """Apply logging settings to the ``moonsugar`` logger.

    Idempotent: a handler installed by a previous call is replaced, handlers added
    by the application are left alone.
    """
    if settings is None:
        from .settings import get_settings
        settings = get_settings()

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(settings.effective_log_level)

    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_MARK, False)]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(output or sys.stderr)
    handler.setFormatter(JsonFormatter() if settings.logging.format == "json" else logging.Formatter(_TEXT_FORMAT))
    setattr(handler, _HANDLER_MARK, True)
    logger.addHandler(handler)
    return logger
