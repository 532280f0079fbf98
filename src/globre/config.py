"""
TOML config for the globre CLI.

A config lives in `.globre.toml`, `globre.toml`, or the `[tool.globre]` table of
a `pyproject.toml`, in the nearest directory at or above the working directory.
Settings go at the top level or in a `[matching]` table:

    ignore-case = true

    [matching]
    invert-match = false
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]

CONFIG_FILENAMES = (".globre.toml", "globre.toml", "pyproject.toml")
MATCHING_SECTION = "matching"


class ConfigError(ValueError):
    """A config file that can't be read or holds a bad value."""


@dataclass(frozen=True)
class GlobreConfig:
    """Matching defaults from a config file. `None` means the key was absent."""

    ignore_case: bool | None = None
    invert_match: bool | None = None

    def settings(self) -> dict[str, bool]:
        """The configured values, keyed by option name."""
        values = {"ignore_case": self.ignore_case, "invert_match": self.invert_match}
        return {name: value for name, value in values.items() if value is not None}


def _globre_table(path: Path) -> dict[str, Any] | None:
    """The globre settings in `path`, or `None` for a pyproject without them."""
    try:
        data = tomllib.loads(path.read_text())
    except (tomllib.TOMLDecodeError, OSError) as e:
        raise ConfigError(f"{path}: {e}") from e
    if path.name == "pyproject.toml":
        return data.get("tool", {}).get("globre")
    return data


def find_config_file(start_dir: Path) -> Path | None:
    """The first config file found walking up from `start_dir`, if any."""
    start = start_dir.resolve()
    for directory in (start, *start.parents):
        for filename in CONFIG_FILENAMES:
            candidate = directory / filename
            if not candidate.is_file():
                continue
            if filename != "pyproject.toml" or _has_globre_table(candidate):
                return candidate
    return None


def _has_globre_table(pyproject: Path) -> bool:
    # A broken pyproject.toml belongs to some other tool; skip it.
    try:
        return _globre_table(pyproject) is not None
    except ConfigError:
        return False


def _read_bool(table: dict[str, Any], key: str, path: Path) -> bool | None:
    value = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise ConfigError(f"{path}: '{key}' must be true or false, not {value!r}")


def load_config(config_path: Path) -> GlobreConfig:
    """
    Read a config file. Raises `ConfigError` for unparseable TOML or a setting
    that isn't a boolean. Unknown keys are ignored.
    """
    table = dict(_globre_table(config_path) or {})
    section = table.pop(MATCHING_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigError(f"{config_path}: '{MATCHING_SECTION}' must be a table")
    table.update(section)

    return GlobreConfig(
        ignore_case=_read_bool(table, "ignore-case", config_path),
        invert_match=_read_bool(table, "invert-match", config_path),
    )
