"""
Backslash escape decoding and regex-safe emission of literal characters.
"""

from __future__ import annotations

import re

ESCAPE_CHAR = "\\"

# Letters that decode to control characters after a backslash.
# Any other escaped character stands for itself.
LETTER_ESCAPES: dict[str, str] = {
    "a": "\x07",
    "b": "\x08",
    "e": "\x1b",
    "f": "\x0c",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\x0b",
}


def decode_escape(char: str) -> str:
    """Map the character following a backslash to the character it stands for."""
    return LETTER_ESCAPES.get(char, char)


def literal(char: str) -> str:
    """
    Regex source matching `char` literally. Safe both at top level and inside
    a `[...]` set, since `re.escape()` also covers `]`, `^`, `-` and `\\`.
    """
    return re.escape(char)
