"""Moonsugar - Maybe, Result and Validation types for Python.

Three small algebraic data types with combinators for construction, extraction
with default, mapping, chaining, type predicates and conversion between them.

Quick Start:
    >>> from moonsugar import maybe, result, validation
    >>> from moonsugar import Error, Failure, Just, Nothing, Ok, Success
    >>> maybe.map(Just(3), lambda x: x * 2)
    Just(6)
    >>> result.chain(Ok(3), lambda x: Ok(x + 1) if x > 0 else Error("too small"))
    Ok(4)
    >>> validation.collect([Failure(["too short"]), Success("pw"), Failure(["no digits"])])
    Failure(['too short', 'no digits'])

Converting between types:
    >>> result.from_maybe(maybe.from_nilable(None), "missing")
    Error('missing')
    >>> validation.from_result(Error("bad"))
    Failure(['bad'])

Exception boundary:
    >>> result.attempt(lambda: int("42"))
    Ok(42)
    >>> result.attempt(lambda: {}["key"])
    Error('key')
"""

from __future__ import annotations

__version__ = "0.2.0"

from . import maybe, result, validation
from .config import configure_logging, get_settings
from .errors import (
    CapturedError,
    EmptyCollectionError,
    ErrorCode,
    MoonsugarError,
    UnwrapError,
    classify_exception,
)
from .maybe import Just, Maybe, Nothing
from .result import Error, Ok, Result, attempt, attempt_detailed
from .validation import Failure, Success, Validation

__all__ = [
    # Modules
    "maybe", "result", "validation",
    # Types and variants
    "Maybe", "Just", "Nothing",
    "Result", "Ok", "Error",
    "Validation", "Success", "Failure",
    # Exception boundary
    "attempt", "attempt_detailed", "CapturedError",
    # Errors
    "MoonsugarError", "UnwrapError", "EmptyCollectionError", "ErrorCode", "classify_exception",
    # Configuration
    "configure_logging", "get_settings",
]
