#!/usr/bin/env python3
"""
globre: Translate shell glob patterns into regular expressions

Common usage:
  globre 'src/*.{py,pyi}'
  globre 'linux-[0-9]*-{generic,aws}' linux-5.2.27b1-generic linux-4.0.12-aws
  ls | globre --stdin '*.conf'

With no strings to test, prints the translated regex. Otherwise prints each
string the pattern matches and exits 0 if there was at least one, 1 if none,
and 2 if the pattern is malformed.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import sys
from dataclasses import dataclass
from pathlib import Path

from globre.config import ConfigError, GlobreConfig, find_config_file, load_config
from globre.errors import GlobError
from globre.matcher import GlobPattern


@dataclass
class Options:
    """Command-line options for the globre tool."""

    pattern: str | None
    texts: list[str]
    stdin: bool
    ignore_case: bool
    invert_match: bool
    quiet: bool
    version: bool


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments.

    Returns the options and the set of config-backed flags the user explicitly
    passed, so a config file never overrides them.
    """
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="globre",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("pattern", nargs="?", default=None, help="Glob pattern to translate")
    parser.add_argument(
        "texts",
        nargs="*",
        default=[],
        metavar="TEXT",
        help="Strings to match against the pattern",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Also match each line read from stdin",
    )
    # None defaults mark flags the user did not pass (for config merge precedence).
    parser.add_argument(
        "-i",
        "--ignore-case",
        action="store_true",
        default=None,
        dest="ignore_case",
        help="Match case-insensitively",
    )
    parser.add_argument(
        "-v",
        "--invert-match",
        action="store_true",
        default=None,
        dest="invert_match",
        help="Print the strings that do not match",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Print nothing; report the result through the exit status only",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    explicit_flags = {
        name for name in ("ignore_case", "invert_match") if getattr(opts, name) is not None
    }

    return (
        Options(
            pattern=opts.pattern,
            texts=opts.texts,
            stdin=opts.stdin,
            ignore_case=bool(opts.ignore_case),
            invert_match=bool(opts.invert_match),
            quiet=opts.quiet,
            version=opts.version,
        ),
        explicit_flags,
    )


def apply_config(options: Options, config: GlobreConfig, explicit_flags: set[str]) -> None:
    """Fill in config-file defaults for the flags not given on the command line."""
    for name, value in config.settings().items():
        if name not in explicit_flags:
            setattr(options, name, value)


def _read_subjects(options: Options) -> list[str]:
    subjects = list(options.texts)
    if options.stdin:
        subjects.extend(line.rstrip("\r\n") for line in sys.stdin)
    return subjects


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the globre CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for a match or a printed regex, 1 for no match, 2 for errors)
    """
    options, explicit_flags = _parse_args(args)

    if options.version:
        try:
            version = importlib.metadata.version("globre")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    if options.pattern is None:
        print(
            "Error: No pattern specified. Use --help for more options.",
            file=sys.stderr,
        )
        return 2

    config_path = find_config_file(Path.cwd())
    if config_path:
        try:
            apply_config(options, load_config(config_path), explicit_flags)
        except ConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

    try:
        pattern = GlobPattern.from_glob(options.pattern, ignore_case=options.ignore_case)
    except GlobError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if not options.texts and not options.stdin:
        if not options.quiet:
            print(pattern.regex)
        return 0

    matched = pattern.filter(_read_subjects(options), invert=options.invert_match)
    if not options.quiet:
        for text in matched:
            print(text)
    return 0 if matched else 1


if __name__ == "__main__":
    sys.exit(main())
