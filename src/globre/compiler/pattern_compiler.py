"""
Single-pass translation of a glob pattern into Python regex source.

The scanner walks the glob left to right, dispatching on the current character
and descending into the class and alternation parsers for `[` and `{`.
Fragments are collected in source order and joined once at the end.
"""

from __future__ import annotations

from globre.compiler.alternation import ALT_OPEN, translate_alternation
from globre.compiler.char_class import CLASS_OPEN, parse_class
from globre.compiler.escapes import ESCAPE_CHAR, decode_escape, literal
from globre.errors import TrailingBackslash

# Globs match the whole subject. `\Z` rather than `$`, which would also accept
# a trailing newline.
START_ANCHOR = r"\A"
END_ANCHOR = r"\Z"

# Wildcards never match a path separator.
ANY_CHAR = "[^/]"
ANY_RUN = "[^/]*"

_WILDCARDS: dict[str, str] = {
    "?": ANY_CHAR,
    "*": ANY_RUN,
}


def translate(glob: str) -> str:
    """Translate the body of a glob, without anchors."""
    fragments: list[str] = []
    end = len(glob)
    pos = 0
    while pos < end:
        char = glob[pos]
        if char in _WILDCARDS:
            fragments.append(_WILDCARDS[char])
            pos += 1
        elif char == ESCAPE_CHAR:
            if pos + 1 >= end:
                raise TrailingBackslash(glob, pos)
            fragments.append(literal(decode_escape(glob[pos + 1])))
            pos += 2
        elif char == CLASS_OPEN:
            char_class, pos = parse_class(glob, pos)
            fragments.append(char_class.to_regex())
        elif char == ALT_OPEN:
            group, pos = translate_alternation(glob, pos)
            fragments.append(group)
        else:
            fragments.append(literal(char))
            pos += 1
    return "".join(fragments)


def compile_glob(glob: str) -> str:
    """
    Translate a shell glob into anchored regex source for Python's `re` module.

    Supports `?`, `*`, `[...]` classes (with `!` negation and ranges), `{a,b}`
    alternation and backslash escapes. Raises a `GlobError` subclass on
    malformed input; no partial result is ever returned.
    """
    return START_ANCHOR + translate(glob) + END_ANCHOR
