"""
Compiled matchers built on top of the pattern compiler.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache

from globre.compiler import compile_glob

# Bounded like `re`'s own pattern cache.
GLOB_CACHE_SIZE = 256


@lru_cache(maxsize=GLOB_CACHE_SIZE)
def glob_to_regex(glob: str, flags: int = 0) -> re.Pattern[str]:
    """Translate a glob and compile it with `re`. Recent results are memoized."""
    return re.compile(compile_glob(glob), flags)


@dataclass(frozen=True)
class GlobPattern:
    """A glob together with its regex source and compiled matcher."""

    glob: str
    regex: str
    flags: int
    compiled: re.Pattern[str]

    @classmethod
    def from_glob(cls, glob: str, ignore_case: bool = False) -> GlobPattern:
        flags = re.IGNORECASE if ignore_case else 0
        compiled = glob_to_regex(glob, flags)
        return cls(glob=glob, regex=compiled.pattern, flags=flags, compiled=compiled)

    def matches(self, text: str) -> bool:
        return self.compiled.fullmatch(text) is not None

    def filter(self, texts: Iterable[str], invert: bool = False) -> list[str]:
        """The texts that match (or, with `invert`, that don't), in input order."""
        return [text for text in texts if self.matches(text) != invert]
