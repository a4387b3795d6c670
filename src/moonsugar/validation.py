"""Validation type for checks whose failures accumulate.

A Validation is either ``Success(value)`` or ``Failure(reasons)``, where reasons is
always a list. Combining two failures concatenates their reasons, so independent
checks can all report instead of stopping at the first problem.

Example:
    >>> from moonsugar import validation
    >>> from moonsugar.validation import Failure, Success
    >>> validation.collect([
    ...     Failure(["not long enough"]),
    ...     Success("pw"),
    ...     Failure(["not enough capital letters"]),
    ... ])
    Failure(['not long enough', 'not enough capital letters'])
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, cast

from .errors import EmptyCollectionError, UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .maybe import Maybe
    from .result import Result

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

_SUCCESS = True
_FAILURE = False


class Validation(Generic[T, E]):
    """Discriminated union of a valid value (Success) and a list of reasons (Failure).

    Failure reasons are stored as a tuple and handed out as fresh lists, so a
    Validation cannot be changed through the list it returns.

    Examples:
        >>> Failure(["too short"]) + Failure(["no digits"])
        Failure(['too short', 'no digits'])
        >>> Success(2) + Success(3)
        Success(3)
    """

    __slots__ = ("_value", "_is_success")
    __match_args__ = ("_value",)

    def __init__(self, value: T | tuple[E, ...], is_success: bool) -> None:
        """Private constructor. Use Success() or Failure() instead."""
        self._value = value
        self._is_success = is_success

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_success(self) -> bool:
        return self._is_success

    def is_failure(self) -> bool:
        return not self._is_success

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract the Success value.

        Raises:
            UnwrapError: If Validation is Failure
        """
        if self._is_success:
            return cast(T, self._value)
        raise UnwrapError(self, "Called unwrap() on Failure value")

    def unwrap_failure(self) -> list[E]:
        """Extract the Failure reasons as a new list.

        Raises:
            UnwrapError: If Validation is Success
        """
        if not self._is_success:
            return list(cast("tuple[E, ...]", self._value))
        raise UnwrapError(self, "Called unwrap_failure() on Success value")

    @property
    def reasons(self) -> list[E]:
        """Failure reasons, empty for a Success."""
        return [] if self._is_success else list(cast("tuple[E, ...]", self._value))

    def get_with_default(self, default: U) -> T | U:
        """Extract the Success value or return default."""
        return cast(T, self._value) if self._is_success else default

    # ─────────────────────────────────────────────────────────────────
    # Functor
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Validation[U, E]:
        """Map f over the Success value. Failure is returned as-is."""
        if self._is_success:
            return Success(f(cast(T, self._value)))
        return cast("Validation[U, E]", self)

    def map_failure(self, f: Callable[[E], F]) -> Validation[T, F]:
        """Map f over each Failure reason. Success is returned as-is."""
        if not self._is_success:
            return Validation(tuple(f(r) for r in cast("tuple[E, ...]", self._value)), _FAILURE)
        return cast("Validation[T, F]", self)

    # ─────────────────────────────────────────────────────────────────
    # Combination
    # ─────────────────────────────────────────────────────────────────

    def concat(self, other: Validation[T, E]) -> Validation[T, E]:
        """Combine with other. Failures win and accumulate in order, the last Success wins.

        Raises:
            TypeError: If other is not a Validation
        """
        if not isinstance(other, Validation):
            raise TypeError(f"cannot concat Validation with {type(other).__name__}")
        if self._is_success:
            return other
        if other._is_success:
            return self
        return Validation((*cast("tuple[E, ...]", self._value), *cast("tuple[E, ...]", other._value)), _FAILURE)

    def __add__(self, other: object) -> Validation[T, E]:
        if not isinstance(other, Validation):
            return NotImplemented
        return self.concat(other)

    def match(self, *, success: Callable[[T], U], failure: Callable[[list[E]], U]) -> U:
        """Exhaustive case analysis over both variants."""
        if self._is_success:
            return success(cast(T, self._value))
        return failure(list(cast("tuple[E, ...]", self._value)))

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_success

    def __repr__(self) -> str:
        if self._is_success:
            return f"Success({self._value!r})"
        return f"Failure({list(cast('tuple[E, ...]', self._value))!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Validation):
            return NotImplemented
        return self._is_success == other._is_success and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_success, self._value))

    def __iter__(self) -> Iterator[T]:
        """Yield the Success value, or nothing."""
        if self._is_success:
            yield cast(T, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructors
# ═════════════════════════════════════════════════════════════════════════════


def Success(value: T) -> Validation[T, Any]:  # noqa: N802
    """Construct Success variant."""
    return Validation(value, _SUCCESS)


def Failure(reasons: Sequence[E]) -> Validation[Any, E]:  # noqa: N802
    """Construct Failure variant from a list of reasons.

    Raises:
        TypeError: If reasons is not an ordered sequence, or is a bare str/bytes
    """
    if isinstance(reasons, (str, bytes, bytearray)) or not isinstance(reasons, Sequence):
        raise TypeError(f"Failure reasons must be a list, got {type(reasons).__name__}")
    return Validation(tuple(reasons), _FAILURE)


def success(value: T) -> Validation[T, Any]:
    """Helper to create a Success.

    >>> success(3)
    Success(3)
    """
    return Success(value)


def failure(reasons: Sequence[E]) -> Validation[Any, E]:
    """Helper to create a Failure. The reasons list is used as given, not wrapped again.

    >>> failure(["Goat is floating"])
    Failure(['Goat is floating'])
    """
    return Failure(reasons)


# ═════════════════════════════════════════════════════════════════════════════
# Combinators
# ═════════════════════════════════════════════════════════════════════════════


def is_validation(value: object) -> bool:
    """True iff value is a Success or Failure."""
    return isinstance(value, Validation)


def get_with_default(v: Validation[T, E], default: U) -> T | U:
    """Inner value of a Success, otherwise default."""
    return v.get_with_default(default) if is_validation(v) else default


def concat(a: Validation[T, E], b: Validation[T, E]) -> Validation[T, E]:
    """Combine two validations.

    >>> concat(Failure(["not enough chars"]), Failure(["not long enough"]))
    Failure(['not enough chars', 'not long enough'])
    >>> concat(Failure(["Game Crashed"]), Success(3))
    Failure(['Game Crashed'])

    Raises:
        TypeError: If either argument is not a Validation
    """
    if not is_validation(a):
        raise TypeError(f"cannot concat {type(a).__name__} with Validation")
    return a.concat(b)


def collect(validations: Iterable[Validation[T, E]]) -> Validation[T, E]:
    """Combine a sequence of validations as concat(v1, concat(v2, concat(v3, ...))).

    Failure reasons come out in input order; when every item succeeds the last
    Success is returned.

    Raises:
        EmptyCollectionError: If validations is empty
        TypeError: If any item is not a Validation
    """
    items = list(validations)
    if not items:
        raise EmptyCollectionError("collect() requires at least one validation")
    for item in items:
        if not is_validation(item):
            raise TypeError(f"collect() expects Validations, got {type(item).__name__}")
    return reduce(lambda acc, item: concat(item, acc), reversed(items))


def map(v: Validation[T, E], f: Callable[[T], U]) -> Validation[U, E]:  # noqa: A001
    """Apply f to a Success payload. Anything else passes through untouched."""
    return v.map(f) if is_validation(v) else v


def map_failure(v: Validation[T, E], f: Callable[[E], F]) -> Validation[T, F]:
    """Apply f to every Failure reason. Anything else passes through untouched.

    >>> map_failure(Failure(["Dwarves"]), str.upper)
    Failure(['DWARVES'])
    """
    return v.map_failure(f) if is_validation(v) else v


# ═════════════════════════════════════════════════════════════════════════════
# Conversions
# ═════════════════════════════════════════════════════════════════════════════


def from_nilable(value: T | None, reasons: Sequence[E]) -> Validation[T, E]:
    """Success(value) unless value is None, else Failure(reasons)."""
    return Failure(reasons) if value is None else Success(value)


def from_maybe(m: Maybe[T], reasons: Sequence[E]) -> Validation[T, E]:
    """Success for a Just, Failure(reasons) for anything else."""
    from .maybe import is_maybe

    if is_maybe(m) and m.is_just():
        return Success(m.unwrap())
    return Failure(reasons)


def from_result(r: Result[T, E]) -> Validation[T, E]:
    """Success for an Ok; an Error's single reason becomes a one-element Failure.

    >>> from moonsugar.result import Error
    >>> from_result(Error("You Died"))
    Failure(['You Died'])

    Raises:
        TypeError: If r is not a Result
    """
    from .result import is_result

    if not is_result(r):
        raise TypeError(f"from_result() expects a Result, got {type(r).__name__}")
    if r.is_ok():
        return Success(r.unwrap())
    return Failure([r.unwrap_error()])
