"""
Parsing of `[...]` character classes.
"""

from __future__ import annotations

from globre.compiler.escapes import ESCAPE_CHAR, decode_escape
from globre.compiler.types import CharClass, make_class_item
from globre.errors import InvalidRange, UnterminatedClass

CLASS_OPEN = "["
CLASS_CLOSE = "]"
CLASS_NEGATE = "!"
RANGE_DASH = "-"


def _read_member(source: str, pos: int, class_start: int) -> tuple[str, int]:
    """Read one (possibly escaped) member character starting at `pos`."""
    char = source[pos]
    if char != ESCAPE_CHAR:
        return char, pos + 1
    if pos + 1 >= len(source):
        raise UnterminatedClass(source, class_start)
    return decode_escape(source[pos + 1]), pos + 2


def parse_class(source: str, start: int) -> tuple[CharClass, int]:
    """
    Parse the class whose `[` is at `source[start]`.

    Returns the parsed class and the index just past its closing `]`. A `]` in
    the first member position is a literal member, and a `-` is a range marker
    only between two members.
    """
    end = len(source)
    pos = start + 1
    char_class = CharClass()

    if pos < end and source[pos] == CLASS_NEGATE:
        char_class.negated = True
        pos += 1

    first = True
    while True:
        if pos >= end:
            raise UnterminatedClass(source, start)
        if source[pos] == CLASS_CLOSE and not first:
            return char_class, pos + 1
        first = False

        low_pos = pos
        low, pos = _read_member(source, pos, start)

        is_range = (
            pos + 1 < end and source[pos] == RANGE_DASH and source[pos + 1] != CLASS_CLOSE
        )
        if not is_range:
            char_class.items.append(make_class_item(low, low))
            continue

        high, pos = _read_member(source, pos + 1, start)
        if low > high:
            raise InvalidRange(source, low_pos, f"{low!r}-{high!r}")
        char_class.items.append(make_class_item(low, high))
