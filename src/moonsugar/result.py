"""Result type for computations that succeed with a value or fail with one reason.

A Result is either ``Ok(value)`` or ``Error(reason)``. ``attempt`` is the one
boundary where a raised exception is turned into an ``Error``.

Example:
    >>> from moonsugar import result
    >>> from moonsugar.result import Error, Ok
    >>> def positive(x: int) -> Result[int, str]:
    ...     return Ok(x) if x > 0 else Error("number less than 1")
    >>> result.chain(Ok(3), positive)
    Ok(3)
    >>> result.chain(Ok(0), positive)
    Error('number less than 1')
    >>> result.attempt(lambda: int("seven"))
    Error("invalid literal for int() with base 10: 'seven'")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, cast

from pydantic import ValidationError
from pydantic_settings import SettingsError

from .config import AttemptSettings, get_settings
from .errors import CapturedError, UnwrapError, exception_message

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .maybe import Maybe
    from .validation import Validation

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

_OK = True
_ERROR = False

logger = logging.getLogger("moonsugar.result")


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Error).

    Examples:
        >>> Ok(42).map(lambda x: x * 2).unwrap()
        84
        >>> Error("fail").map(lambda x: x * 2).unwrap_error()
        'fail'
        >>> Ok(5).chain(lambda x: Ok(x * 2) if x > 0 else Error("neg")).unwrap()
        10
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        """Private constructor. Use Ok() or Error() instead."""
        self._value = value
        self._is_ok = is_ok

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_ok(self) -> bool:
        return self._is_ok

    def is_error(self) -> bool:
        return not self._is_ok

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value.

        Raises:
            UnwrapError: If Result is Error
        """
        if self._is_ok:
            return cast(T, self._value)
        raise UnwrapError(self, "Called unwrap() on Error value")

    def unwrap_error(self) -> E:
        """Extract Error reason.

        Raises:
            UnwrapError: If Result is Ok
        """
        if not self._is_ok:
            return cast(E, self._value)
        raise UnwrapError(self, "Called unwrap_error() on Ok value")

    def get_with_default(self, default: U) -> T | U:
        """Extract Ok value or return default."""
        return cast(T, self._value) if self._is_ok else default

    # ─────────────────────────────────────────────────────────────────
    # Functor / Monad
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Map f over the Ok value. Error is returned as-is, f is not called."""
        if self._is_ok:
            return Ok(f(cast(T, self._value)))
        return cast("Result[U, E]", self)

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """Map f over the Error reason, preserving Ok values."""
        if not self._is_ok:
            return Error(f(cast(E, self._value)))
        return cast("Result[T, F]", self)

    def chain(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind. Returns whatever f returns for an Ok value, unwrapped or not.

        Type signature: Result[T, E] -> (T -> Result[U, E]) -> Result[U, E]
        """
        if self._is_ok:
            return f(cast(T, self._value))
        return cast("Result[U, E]", self)

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Alias for chain."""
        return self.chain(f)

    def match(self, *, ok: Callable[[T], U], error: Callable[[E], U]) -> U:
        """Pattern match on Result variants.

        Example:
            >>> Ok(42).match(ok=lambda x: f"success: {x}", error=lambda e: f"failed: {e}")
            'success: 42'
        """
        if self._is_ok:
            return ok(cast(T, self._value))
        return error(cast(E, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_ok

    def __repr__(self) -> str:
        variant = "Ok" if self._is_ok else "Error"
        return f"{variant}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value))

    def __iter__(self) -> Iterator[T]:
        """Iterate over Ok value (yields 0 or 1 element)."""
        if self._is_ok:
            yield cast(T, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructors
# ═════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, Any]:  # noqa: N802
    """Construct Ok variant (success)."""
    return Result(value, _OK)


def Error(reason: E) -> Result[Any, E]:  # noqa: N802
    """Construct Error variant (failure)."""
    return Result(reason, _ERROR)


def ok(value: T) -> Result[T, Any]:
    """Helper to create an Ok.

    >>> ok(3)
    Ok(3)
    """
    return Ok(value)


def error(reason: E) -> Result[Any, E]:
    """Helper to create an Error.

    >>> error("Goat is floating")
    Error('Goat is floating')
    """
    return Error(reason)


# ═════════════════════════════════════════════════════════════════════════════
# Combinators
# ═════════════════════════════════════════════════════════════════════════════


def is_result(value: object) -> bool:
    """True iff value is an Ok or Error."""
    return isinstance(value, Result)


def get_with_default(r: Result[T, E], default: U) -> T | U:
    """Inner value of an Ok, otherwise default."""
    return r.get_with_default(default) if is_result(r) else default


def map(r: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:  # noqa: A001
    """Apply f to an Ok payload. Anything else passes through untouched."""
    return r.map(f) if is_result(r) else r


def chain(r: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Apply f to an Ok payload and return its output directly.

    >>> chain(Ok(3), lambda x: Ok(x * 3))
    Ok(9)
    >>> chain(Error("no number found"), lambda x: Ok(x * 3))
    Error('no number found')
    """
    return r.chain(f) if is_result(r) else r


# ═════════════════════════════════════════════════════════════════════════════
# Conversions
# ═════════════════════════════════════════════════════════════════════════════


def from_nilable(value: T | None, reason: E) -> Result[T, E]:
    """Ok(value) unless value is None, else Error(reason)."""
    return Error(reason) if value is None else Ok(value)


def from_maybe(m: Maybe[T], reason: E) -> Result[T, E]:
    """Ok for a Just, Error(reason) for anything else."""
    from .maybe import is_maybe

    if is_maybe(m) and m.is_just():
        return Ok(m.unwrap())
    return Error(reason)


def from_validation(v: Validation[T, E]) -> Result[T, list[E]]:
    """Ok for a Success, Error carrying the reasons list for a Failure.

    >>> from moonsugar.validation import Failure
    >>> from_validation(Failure(["You Died", "You ran out of mana"]))
    Error(['You Died', 'You ran out of mana'])

    Raises:
        TypeError: If v is not a Validation
    """
    from .validation import is_validation

    if not is_validation(v):
        raise TypeError(f"from_validation() expects a Validation, got {type(v).__name__}")
    if v.is_success():
        return Ok(v.unwrap())
    return Error(v.unwrap_failure())


# ═════════════════════════════════════════════════════════════════════════════
# Exception Boundary
# ═════════════════════════════════════════════════════════════════════════════


def _attempt_settings() -> AttemptSettings:
    """Settings for the boundary, falling back to defaults when the environment is invalid."""
    try:
        return get_settings().attempt
    except (ValidationError, SettingsError) as e:
        logger.warning("invalid attempt settings, using defaults: %s", e)
        return AttemptSettings.model_construct()


def _log_captured(settings: AttemptSettings, exc: Exception) -> None:
    if settings.log_captured:
        logger.debug("attempt captured %s: %s", type(exc).__name__, exc)


def attempt(thunk: Callable[[], T]) -> Result[T, str]:
    """Call thunk once, converting a raised exception into Error(message).

    Any Exception subclass is captured; KeyboardInterrupt and SystemExit propagate.

    >>> attempt(lambda: "Shoot Elf")
    Ok('Shoot Elf')
    >>> attempt(lambda: {}["key"])
    Error('key')
    """
    settings = _attempt_settings()
    try:
        return Result(thunk(), _OK)
    except Exception as e:
        _log_captured(settings, e)
        return Result(exception_message(e), _ERROR)


def attempt_detailed(thunk: Callable[[], T]) -> Result[T, CapturedError]:
    """Like attempt, but the Error carries a CapturedError with type and code."""
    settings = _attempt_settings()
    try:
        return Result(thunk(), _OK)
    except Exception as e:
        _log_captured(settings, e)
        return Result(CapturedError.from_exception(e, include_traceback=settings.include_traceback), _ERROR)
