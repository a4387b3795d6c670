"""Tests for exception classification and CapturedError."""

from __future__ import annotations

import json

import pytest

from moonsugar.errors import (
    CapturedError,
    EmptyCollectionError,
    ErrorCode,
    MoonsugarError,
    UnwrapError,
    classify_exception,
    exception_message,
)
from moonsugar.maybe import Nothing


@pytest.mark.parametrize(
    ("exc", "code"),
    [
        (TimeoutError("took too long"), ErrorCode.TIMEOUT),
        (PermissionError("nope"), ErrorCode.PERMISSION_DENIED),
        (json.JSONDecodeError("Expecting value", "", 0), ErrorCode.PARSE_ERROR),
        (ZeroDivisionError("division by zero"), ErrorCode.ARITHMETIC),
        (KeyError("k"), ErrorCode.NOT_FOUND),
        (IndexError("list index out of range"), ErrorCode.NOT_FOUND),
        (TypeError("unsupported operand"), ErrorCode.INVALID_TYPE),
        (ValueError("bad"), ErrorCode.INVALID_VALUE),
        (RuntimeError("boom"), ErrorCode.UNKNOWN),
    ],
)
def test_classify_exception(exc: Exception, code: ErrorCode) -> None:
    """Exceptions map to codes by name and message."""
    assert classify_exception(exc) == code


def test_exception_message() -> None:
    """Single string arguments are returned verbatim."""
    assert exception_message(KeyError("boom")) == "boom"
    assert exception_message(RuntimeError("boom")) == "boom"
    assert exception_message(RuntimeError()) == "RuntimeError"
    assert exception_message(ValueError(1, 2)) == "(1, 2)"


def test_captured_error_is_frozen() -> None:
    """CapturedError is an immutable model."""
    captured = CapturedError.from_exception(ValueError("bad"))
    with pytest.raises(Exception):
        captured.message = "other"  # type: ignore[misc]


def test_captured_error_render() -> None:
    """render() includes type, code and message."""
    captured = CapturedError.from_exception(ValueError("bad"))
    assert str(captured) == "ValueError [INVALID_VALUE]: bad"


def test_captured_error_with_traceback() -> None:
    """Traceback text is stored when requested."""
    try:
        raise ValueError("bad")
    except ValueError as e:
        captured = CapturedError.from_exception(e, include_traceback=True)
    assert captured.details is not None
    assert "ValueError: bad" in captured.details
    assert captured.render().startswith("ValueError [INVALID_VALUE]: bad\n")


def test_error_hierarchy() -> None:
    """Library errors also subclass the matching builtin."""
    assert issubclass(UnwrapError, MoonsugarError)
    assert issubclass(UnwrapError, RuntimeError)
    assert issubclass(EmptyCollectionError, MoonsugarError)
    assert issubclass(EmptyCollectionError, ValueError)


def test_unwrap_error_keeps_variant() -> None:
    """UnwrapError carries the offending value."""
    with pytest.raises(UnwrapError) as info:
        Nothing.unwrap()
    assert info.value.variant is Nothing
    assert "Nothing" in str(info.value)
