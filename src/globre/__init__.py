"""
globre: translate shell glob patterns into regular expressions.

Usage::

    from globre import compile_glob, glob_to_regex

    compile_glob("*.{md,txt}")  # regex source
    glob_to_regex("linux-[0-9]*").fullmatch("linux-5.2")  # compiled `re.Pattern`
"""

from globre.compiler import compile_glob
from globre.errors import (
    ErrorKind,
    GlobError,
    InvalidRange,
    NestedConstructNotSupported,
    TrailingBackslash,
    UnterminatedAlternation,
    UnterminatedClass,
)
from globre.matcher import GlobPattern, glob_to_regex

__all__ = [
    "ErrorKind",
    "GlobError",
    "GlobPattern",
    "InvalidRange",
    "NestedConstructNotSupported",
    "TrailingBackslash",
    "UnterminatedAlternation",
    "UnterminatedClass",
    "compile_glob",
    "glob_to_regex",
]
