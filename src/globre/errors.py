"""
Errors raised while translating a glob pattern.

Every error carries the pattern being compiled and, where meaningful, the 0-based
index of the construct that triggered it, so callers can point at the problem.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """The kinds of malformed glob syntax the compiler reports."""

    trailing_backslash = "trailing_backslash"
    unterminated_class = "unterminated_class"
    unterminated_alternation = "unterminated_alternation"
    nested_construct = "nested_construct"
    invalid_range = "invalid_range"


class GlobError(ValueError):
    """Base class for all glob compilation errors."""

    kind: ErrorKind
    description: str = "invalid glob pattern"

    def __init__(self, pattern: str, position: int | None = None, detail: str | None = None):
        self.pattern: str = pattern
        self.position: int | None = position
        self.detail: str | None = detail
        super().__init__(self._format())

    def _format(self) -> str:
        msg = self.description
        if self.detail:
            msg = f"{msg} ({self.detail})"
        if self.position is not None:
            msg = f"{msg} at position {self.position}"
        return f"{msg} in {self.pattern!r}"


class TrailingBackslash(GlobError):
    kind = ErrorKind.trailing_backslash
    description = "bare escape character at end of pattern"


class UnterminatedClass(GlobError):
    kind = ErrorKind.unterminated_class
    description = "unclosed character class"


class UnterminatedAlternation(GlobError):
    kind = ErrorKind.unterminated_alternation
    description = "unclosed alternation"


class NestedConstructNotSupported(GlobError):
    kind = ErrorKind.nested_construct
    description = "nested '{' or '[' inside an alternation is not supported"


class InvalidRange(GlobError):
    kind = ErrorKind.invalid_range
    description = "reversed character class range"
