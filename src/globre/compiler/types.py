"""Intermediate types produced while parsing glob constructs."""

from __future__ import annotations

from dataclasses import dataclass, field

from globre.compiler.escapes import literal

SLASH = "/"
# Neighbors of the slash, used when splitting a range around it.
_BEFORE_SLASH = chr(ord(SLASH) - 1)
_AFTER_SLASH = chr(ord(SLASH) + 1)


@dataclass(frozen=True)
class ClassChar:
    """A single literal member of a character class."""

    char: str

    def covers_slash(self) -> bool:
        return self.char == SLASH

    def without_slash(self) -> list[ClassItem]:
        return [] if self.covers_slash() else [self]

    def to_regex(self) -> str:
        return literal(self.char)


@dataclass(frozen=True)
class ClassRange:
    """An inclusive range of characters, `low` <= `high`."""

    low: str
    high: str

    def covers_slash(self) -> bool:
        return self.low <= SLASH <= self.high

    def without_slash(self) -> list[ClassItem]:
        """Split the range around `/`, dropping the slash itself."""
        if not self.covers_slash():
            return [self]
        parts: list[ClassItem] = []
        if self.low < SLASH:
            parts.append(make_class_item(self.low, _BEFORE_SLASH))
        if self.high > SLASH:
            parts.append(make_class_item(_AFTER_SLASH, self.high))
        return parts

    def to_regex(self) -> str:
        return f"{literal(self.low)}-{literal(self.high)}"


ClassItem = ClassChar | ClassRange


def make_class_item(low: str, high: str) -> ClassItem:
    """A range, or a single member when both endpoints are the same character."""
    if low == high:
        return ClassChar(low)
    return ClassRange(low, high)


@dataclass
class CharClass:
    """
    A parsed `[...]` construct. Members are kept in source order.

    Classes never match `/`, the same as `?` and `*`: a positive class drops any
    slash it lists, and a negated class always excludes it.
    """

    negated: bool = False
    items: list[ClassItem] = field(default_factory=list)

    def path_safe_items(self) -> list[ClassItem]:
        if self.negated:
            if any(item.covers_slash() for item in self.items):
                return list(self.items)
            return [*self.items, ClassChar(SLASH)]
        return [part for item in self.items for part in item.without_slash()]

    def to_regex(self) -> str:
        items = self.path_safe_items()
        if not items:
            # Only a slash was listed, so nothing can match.
            return "(?!)"
        body = "".join(item.to_regex() for item in items)
        return f"[^{body}]" if self.negated else f"[{body}]"
