"""Exceptions raised by moonsugar and structured descriptions of captured ones.

Encoded failure (Nothing, Error, Failure) is returned, never raised. The types here
cover the few places where the library does raise (unwrapping the wrong variant,
collecting an empty sequence) and the payload `attempt_detailed` produces.
"""

from __future__ import annotations

import traceback
from enum import StrEnum
from functools import lru_cache
from typing import Self

from pydantic import BaseModel


class MoonsugarError(Exception):
    """Base class for errors raised by moonsugar."""


class UnwrapError(MoonsugarError, RuntimeError):
    """Raised when unwrapping the payload of the wrong variant."""

    __slots__ = ("variant",)

    def __init__(self, variant: object, message: str) -> None:
        self.variant = variant
        super().__init__(f"{message}: {variant!r}")


class EmptyCollectionError(MoonsugarError, ValueError):
    """Raised when reducing an empty sequence that has no identity element."""


class ErrorCode(StrEnum):
    """Coarse classification of exceptions captured at an attempt boundary."""
    INVALID_VALUE = "INVALID_VALUE"
    INVALID_TYPE = "INVALID_TYPE"
    NOT_FOUND = "NOT_FOUND"
    ARITHMETIC = "ARITHMETIC"
    TIMEOUT = "TIMEOUT"
    IO_ERROR = "IO_ERROR"
    PARSE_ERROR = "PARSE_ERROR"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    UNKNOWN = "UNKNOWN"


# Checked in order, first hit wins
_PATTERN_CODES: dict[str, ErrorCode] = {
    "timeout": ErrorCode.TIMEOUT,
    "permission": ErrorCode.PERMISSION_DENIED,
    "decode": ErrorCode.PARSE_ERROR,
    "json": ErrorCode.PARSE_ERROR,
    "parse": ErrorCode.PARSE_ERROR,
    "zerodivision": ErrorCode.ARITHMETIC,
    "overflow": ErrorCode.ARITHMETIC,
    "arithmetic": ErrorCode.ARITHMETIC,
    "keyerror": ErrorCode.NOT_FOUND,
    "indexerror": ErrorCode.NOT_FOUND,
    "lookup": ErrorCode.NOT_FOUND,
    "notfound": ErrorCode.NOT_FOUND,
    "oserror": ErrorCode.IO_ERROR,
    "ioerror": ErrorCode.IO_ERROR,
    "typeerror": ErrorCode.INVALID_TYPE,
    "attributeerror": ErrorCode.INVALID_TYPE,
    "valueerror": ErrorCode.INVALID_VALUE,
    "validation": ErrorCode.INVALID_VALUE,
}
_PATTERN_KEYS = tuple(_PATTERN_CODES)


@lru_cache(maxsize=256)
def _classify_cached(exc_key: str) -> ErrorCode:
    haystack = exc_key.lower()
    for pattern in _PATTERN_KEYS:
        if pattern in haystack:
            return _PATTERN_CODES[pattern]
    return ErrorCode.UNKNOWN


def classify_exception(exc: BaseException) -> ErrorCode:
    """Map exception to error code via pattern matching on name/message."""
    return _classify_cached(f"{type(exc).__name__} {exc}")


def exception_message(exc: BaseException) -> str:
    """Extract the human-readable message carried by an exception.

    A single string argument is returned verbatim, which keeps ``KeyError("boom")``
    as ``"boom"`` instead of its quoted ``str()``. Exceptions without any text fall
    back to their class name.

    >>> exception_message(KeyError("boom"))
    'boom'
    >>> exception_message(ValueError())
    'ValueError'
    """
    if len(exc.args) == 1 and isinstance(exc.args[0], str):
        return exc.args[0]
    return str(exc) or type(exc).__name__


class CapturedError(BaseModel):
    """Structured description of an exception caught by ``attempt_detailed``."""

    model_config = {"frozen": True}

    message: str
    exception_type: str
    code: ErrorCode = ErrorCode.UNKNOWN
    details: str | None = None

    @classmethod
    def from_exception(cls, exc: BaseException, *, include_traceback: bool = False) -> Self:
        """Create from exception with auto-classification."""
        return cls(
            message=exception_message(exc),
            exception_type=type(exc).__name__,
            code=classify_exception(exc),
            details="".join(traceback.format_exception(exc)) if include_traceback else None,
        )

    def render(self) -> str:
        """Format as ``ExceptionType [CODE]: message``."""
        head = f"{self.exception_type} [{self.code}]: {self.message}"
        return f"{head}\n{self.details}" if self.details else head

    __str__ = render
