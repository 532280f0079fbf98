"""Tests for glob compilation errors."""

from __future__ import annotations

import pytest

from globre import (
    ErrorKind,
    GlobError,
    InvalidRange,
    NestedConstructNotSupported,
    TrailingBackslash,
    UnterminatedAlternation,
    UnterminatedClass,
    compile_glob,
)


@pytest.mark.parametrize(
    ("glob", "error_type", "kind", "position"),
    [
        ("abc\\", TrailingBackslash, ErrorKind.trailing_backslash, 3),
        ("[abc", UnterminatedClass, ErrorKind.unterminated_class, 0),
        ("{a,b", UnterminatedAlternation, ErrorKind.unterminated_alternation, 0),
        ("{a,[b]}", NestedConstructNotSupported, ErrorKind.nested_construct, 3),
        ("[z-a]", InvalidRange, ErrorKind.invalid_range, 1),
    ],
)
def test_error_kinds(
    glob: str, error_type: type[GlobError], kind: ErrorKind, position: int
) -> None:
    with pytest.raises(error_type) as exc:
        compile_glob(glob)
    assert exc.value.kind is kind
    assert exc.value.position == position
    assert exc.value.pattern == glob


def test_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        compile_glob("[abc")


def test_error_message() -> None:
    with pytest.raises(GlobError) as exc:
        compile_glob("ab\\")
    assert str(exc.value) == "bare escape character at end of pattern at position 2 in 'ab\\\\'"


def test_error_message_with_detail() -> None:
    with pytest.raises(InvalidRange) as exc:
        compile_glob("[z-a]")
    assert "'z'-'a'" in str(exc.value)
    assert "position 1" in str(exc.value)


def test_escaped_backslash_is_not_trailing() -> None:
    assert compile_glob("abc\\\\") == r"\Aabc\\\Z"


@pytest.mark.parametrize(("glob", "position"), [("[\\z-a]", 1), ("x[b-\\a]", 2)])
def test_inverted_range_with_escaped_endpoints(glob: str, position: int) -> None:
    with pytest.raises(InvalidRange) as exc:
        compile_glob(glob)
    assert exc.value.position == position
