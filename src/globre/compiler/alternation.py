"""
Parsing of `{a,b,c}` alternation groups.

Branches are one level deep: they may use backslash escapes but not further `{`
or `[` constructs. Wildcards inside a branch are matched literally.
"""

from __future__ import annotations

from dataclasses import dataclass

from globre.compiler.char_class import CLASS_OPEN
from globre.compiler.escapes import ESCAPE_CHAR, decode_escape, literal
from globre.errors import NestedConstructNotSupported, UnterminatedAlternation

ALT_OPEN = "{"
ALT_CLOSE = "}"
ALT_SEPARATOR = ","

_NESTED_OPENERS = frozenset((ALT_OPEN, CLASS_OPEN))


@dataclass(frozen=True)
class Branch:
    """The raw source span of one alternation branch."""

    start: int
    end: int


def _split_branches(source: str, start: int) -> tuple[list[Branch], int]:
    """
    Scan from the `{` at `source[start]` to its unescaped `}`, splitting on
    unescaped commas. Returns the branch spans and the index of the `}`.
    """
    end = len(source)
    branches: list[Branch] = []
    branch_start = pos = start + 1
    while pos < end:
        char = source[pos]
        if char == ESCAPE_CHAR:
            pos += 2
            continue
        if char == ALT_SEPARATOR:
            branches.append(Branch(branch_start, pos))
            branch_start = pos + 1
        elif char == ALT_CLOSE:
            branches.append(Branch(branch_start, pos))
            return branches, pos
        pos += 1
    raise UnterminatedAlternation(source, start)


def _translate_branch(source: str, branch: Branch) -> str:
    parts: list[str] = []
    pos = branch.start
    while pos < branch.end:
        char = source[pos]
        if char in _NESTED_OPENERS:
            raise NestedConstructNotSupported(source, pos)
        if char == ESCAPE_CHAR:
            # The splitter never ends a branch on a bare backslash.
            char = decode_escape(source[pos + 1])
            pos += 1
        parts.append(literal(char))
        pos += 1
    return "".join(parts)


def translate_alternation(source: str, start: int) -> tuple[str, int]:
    """
    Translate the alternation whose `{` is at `source[start]` into a
    non-capturing regex group. Returns the fragment and the index just past `}`.

    An empty `{}` is literal text.
    """
    branches, close = _split_branches(source, start)
    if close == start + 1:
        return literal(ALT_OPEN) + literal(ALT_CLOSE), close + 1
    alternatives = [_translate_branch(source, branch) for branch in branches]
    return "(?:" + "|".join(alternatives) + ")", close + 1
