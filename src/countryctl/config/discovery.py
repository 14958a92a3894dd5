"""Locating and reading the atlas file.

An atlas is a ``countryctl.toml`` holding a ``[country]`` table and a
``[[cities]]`` array.  Lookup order: an explicit ``--config`` path, then
the ``COUNTRYCTL_CONFIG`` env var, then the nearest ``countryctl.toml`` in
the working directory or one of its parents.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

from countryctl.config.models import AtlasConfig

CONFIG_FILENAME = "countryctl.toml"
CONFIG_ENV_VAR = "COUNTRYCTL_CONFIG"


def _existing(path: str | Path) -> Path | None:
    candidate = Path(path)
    return candidate if candidate.is_file() else None


def find_config(start: Path | None = None, *, explicit: str | Path | None = None) -> Path | None:
    """Return the atlas file to load, or None when there is none.

    An *explicit* path or the env var wins outright: if it names a missing
    file the result is None, and no walk-up happens.
    """
    if explicit:
        return _existing(explicit)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return _existing(env_path)

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        found = _existing(directory / CONFIG_FILENAME)
        if found:
            return found
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*, turning syntax errors into a CLI-facing error."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> AtlasConfig:
    """Validate the atlas at *path* (discovered from *cwd* when omitted).

    No file means an empty default atlas.
    """
    path = path or find_config(cwd)
    if path is None:
        return AtlasConfig()
    return AtlasConfig.model_validate(read_toml(path))
