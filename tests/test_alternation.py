"""Tests for `{a,b}` alternation translation."""

from __future__ import annotations

import re

import pytest

from globre.compiler import compile_glob
from globre.compiler.alternation import translate_alternation
from globre.errors import NestedConstructNotSupported, UnterminatedAlternation


def _matches(glob: str, text: str) -> bool:
    return re.match(compile_glob(glob), text) is not None


def test_translate_alternation_fragment() -> None:
    fragment, end = translate_alternation("{a,b}.txt", 0)
    assert fragment == "(?:a|b)"
    assert end == 5


def test_branches_in_source_order() -> None:
    assert compile_glob("{b,a,b}") == r"\A(?:b|a|b)\Z"


def test_wildcards_in_branches_are_literal() -> None:
    glob = "look at {th?is,that,...*}"
    for text in ["look at th?is", "look at that", "look at ...*"]:
        assert _matches(glob, text)
    for text in ["look at this", "look at ths", "look at ", "look at that and stuff"]:
        assert not _matches(glob, text)


def test_empty_branch_matches_empty_string() -> None:
    assert _matches("a{,b}c", "ac")
    assert _matches("a{,b}c", "abc")
    assert not _matches("a{,b}c", "axc")


def test_empty_braces_are_literal() -> None:
    assert _matches("a{}b", "a{}b")
    assert not _matches("a{}b", "ab")


def test_escaped_comma_and_brace() -> None:
    glob = "{a\\,b,c\\}}"
    assert _matches(glob, "a,b")
    assert _matches(glob, "c}")
    assert not _matches(glob, "a")


def test_escape_letters_in_branch() -> None:
    assert _matches("{x\\ny,z}", "x\ny")


def test_regex_metacharacters_in_branch() -> None:
    assert _matches("{a|b,(c)}", "a|b")
    assert _matches("{a|b,(c)}", "(c)")
    assert not _matches("{a|b,(c)}", "a")


def test_multiple_groups() -> None:
    glob = "{foo,bar}{bar,baz}"
    assert _matches(glob, "foobaz")
    assert _matches(glob, "barbar")
    assert not _matches(glob, "foo")


@pytest.mark.parametrize("glob", ["{a,b", "x{", "{a\\}", "{a,[b"])
def test_unterminated_alternation(glob: str) -> None:
    with pytest.raises(UnterminatedAlternation) as exc:
        compile_glob(glob)
    assert exc.value.position == glob.index("{")


@pytest.mark.parametrize(
    ("glob", "position"),
    [("x{a,[b]}", 4), ("{a,{b}}", 3), ("{[ab]}", 1)],
)
def test_nested_construct(glob: str, position: int) -> None:
    with pytest.raises(NestedConstructNotSupported) as exc:
        compile_glob(glob)
    assert exc.value.position == position


def test_escaped_openers_in_branch_are_literal() -> None:
    assert _matches("{\\[a\\],b}", "[a]")
