"""Locate and read the presence configuration file.

Settings live either in a dedicated ``presence.toml`` or in the
``[tool.presence]`` table of a project's ``pyproject.toml``.  Discovery walks
up from the working directory; in each directory a ``presence.toml`` is
preferred, and a ``pyproject.toml`` only counts if it has a
``[tool.presence]`` table, so unrelated Python projects further up the
tree are skipped.  ``PRESENCE_CONFIG`` names a file directly and disables
the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "presence.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "PRESENCE_CONFIG"


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


def read_config_table(path: Path) -> dict[str, Any]:
    """Return the presence settings table stored in *path*.

    For ``pyproject.toml`` this is ``[tool.presence]`` (empty if missing);
    any other file is read as a whole.  Malformed TOML raises
    :class:`click.ClickException` naming the file.
    """
    data = _load_toml(path)
    if path.name != PYPROJECT_FILENAME:
        return data
    table = data.get("tool", {}).get("presence", {})
    if not isinstance(table, dict):
        msg = f"[tool.presence] in {path} must be a table"
        raise click.ClickException(msg)
    return table


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    A ``PRESENCE_CONFIG`` pointing at a missing file yields None rather
    than falling back to the walk.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = current / PYPROJECT_FILENAME
        if pyproject.is_file() and "presence" in _load_toml(pyproject).get("tool", {}):
            return pyproject
        if current.parent == current:
            return None
        current = current.parent
