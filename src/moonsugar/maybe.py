"""Maybe type for values that may be absent.

A Maybe is either ``Just(value)`` or ``Nothing``. Absence is always represented,
never raised: no function in this module raises on a missing value.

Example:
    >>> from moonsugar import maybe
    >>> from moonsugar.maybe import Just, Nothing
    >>> maybe.map(Just(3), lambda x: x * 2)
    Just(6)
    >>> maybe.chain(Just(0), lambda x: Just(x) if x > 0 else Nothing)
    Nothing
    >>> maybe.get_with_default(maybe.from_nilable(None), 0)
    0
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, cast

from .errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .result import Result
    from .validation import Validation

T = TypeVar("T")
U = TypeVar("U")

_JUST = True
_NOTHING = False


class Maybe(Generic[T]):
    """Discriminated union of a present value (Just) and absence (Nothing).

    Mapping never flattens: ``Just(3).map(Just)`` is ``Just(Just(3))``. Use
    ``chain`` when the function already returns a Maybe.

    Examples:
        >>> Just(3).map(lambda x: x + 1).get_with_default(0)
        4
        >>> Nothing.map(lambda x: x + 1).get_with_default(0)
        0
    """

    __slots__ = ("_value", "_is_just")
    __match_args__ = ("_value",)

    def __init__(self, value: T | None, is_just: bool) -> None:
        """Private constructor. Use Just() or Nothing instead."""
        self._value = value
        self._is_just = is_just

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_just(self) -> bool:
        return self._is_just

    def is_nothing(self) -> bool:
        return not self._is_just

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract the Just value.

        Raises:
            UnwrapError: If called on Nothing
        """
        if self._is_just:
            return cast(T, self._value)
        raise UnwrapError(self, "Called unwrap() on Nothing")

    def get_with_default(self, default: U) -> T | U:
        """Extract the Just value or return default."""
        return cast(T, self._value) if self._is_just else default

    # ─────────────────────────────────────────────────────────────────
    # Functor / Monad
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Maybe[U]:
        """Apply f to the Just value and wrap the output. Nothing skips f."""
        if self._is_just:
            return Just(f(cast(T, self._value)))
        return Nothing

    def chain(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Monadic bind. Anything f returns other than a Just collapses to Nothing."""
        if not self._is_just:
            return Nothing
        out = f(cast(T, self._value))
        if isinstance(out, Maybe) and out._is_just:
            return out
        return Nothing

    def flat_map(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Alias for chain."""
        return self.chain(f)

    def match(self, *, just: Callable[[T], U], nothing: Callable[[], U]) -> U:
        """Exhaustive case analysis over both variants.

        Example:
            >>> Just(2).match(just=lambda x: f"got {x}", nothing=lambda: "empty")
            'got 2'
        """
        if self._is_just:
            return just(cast(T, self._value))
        return nothing()

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_just

    def __repr__(self) -> str:
        return f"Just({self._value!r})" if self._is_just else "Nothing"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._is_just == other._is_just and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_just, self._value))

    def __iter__(self) -> Iterator[T]:
        """Yield the Just value, or nothing."""
        if self._is_just:
            yield cast(T, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructors
# ═════════════════════════════════════════════════════════════════════════════


def Just(value: T) -> Maybe[T]:  # noqa: N802
    """Construct Just variant."""
    return Maybe(value, _JUST)


Nothing: Maybe[Any] = Maybe(None, _NOTHING)


def just(value: T) -> Maybe[T]:
    """Helper to create a Just.

    >>> just(3)
    Just(3)
    """
    return Just(value)


def nothing() -> Maybe[Any]:
    """Helper to create Nothing.

    >>> nothing()
    Nothing
    """
    return Nothing


# ═════════════════════════════════════════════════════════════════════════════
# Combinators
# ═════════════════════════════════════════════════════════════════════════════


def is_maybe(value: object) -> bool:
    """True iff value is a Just or Nothing."""
    return isinstance(value, Maybe)


def get_with_default(m: Maybe[T], default: U) -> T | U:
    """Inner value of a Just, otherwise default."""
    return m.get_with_default(default) if is_maybe(m) else default


def map(m: Maybe[T], f: Callable[[T], U]) -> Maybe[U]:  # noqa: A001
    """Apply f to a Just payload. The output is wrapped even when f returns a Maybe.

    >>> map(Just(3), lambda x: Just(x * 3))
    Just(Just(9))
    """
    return m.map(f) if is_maybe(m) else Nothing


def chain(m: Maybe[T], f: Callable[[T], Maybe[U]]) -> Maybe[U]:
    """Apply f returning a Maybe to a Just payload, without nesting.

    >>> chain(Just(3), lambda x: Just(x * 3) if x > 0 else Nothing)
    Just(9)
    """
    return m.chain(f) if is_maybe(m) else Nothing


# ═════════════════════════════════════════════════════════════════════════════
# Conversions
# ═════════════════════════════════════════════════════════════════════════════


def from_nilable(value: T | None) -> Maybe[T]:
    """Nothing for None, Just(value) for everything else (including falsy values)."""
    return Nothing if value is None else Just(value)


def from_result(r: Result[T, Any]) -> Maybe[T]:
    """Just the Ok value; any Error becomes Nothing and its reason is dropped."""
    from .result import is_result

    if is_result(r) and r.is_ok():
        return Just(r.unwrap())
    return Nothing


def from_validation(v: Validation[T, Any]) -> Maybe[T]:
    """Just the Success value; any Failure becomes Nothing."""
    from .validation import is_validation

    if is_validation(v) and v.is_success():
        return Just(v.unwrap())
    return Nothing
