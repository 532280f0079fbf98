"""
The glob-to-regex pattern compiler.

Pure and stateless: no filesystem access, no shared state between calls.
"""

from globre.compiler.pattern_compiler import compile_glob, translate

__all__ = [
    "compile_glob",
    "translate",
]
