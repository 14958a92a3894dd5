"""Shared pytest fixtures and test helpers for countryctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from countryctl.config.discovery import CONFIG_FILENAME
from countryctl.domain.country import Country

ATLAS_TOML = """\
[country]
name = "Testland"

[[cities]]
name = "Alpha"
center = [0, 0]
station = [1, 1]
residents = 100
neighborhoods = 2

[[cities]]
name = "Beta"
center = [10, 5]
station = [9, 5]
residents = 50
neighborhoods = 3

[[cities]]
name = "Gamma"
center = [4, -6]
station = [4, -5]
residents = 75
neighborhoods = 1
"""


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's COUNTRYCTL_* environment out of the tests."""
    monkeypatch.delenv("COUNTRYCTL_CONFIG", raising=False)
    monkeypatch.delenv("COUNTRYCTL_COUNTRY__NAME", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by the CLI during a test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("countryctl")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def country() -> Country:
    """A small country: Alpha (0,0), Beta (10,5), Gamma (4,-6)."""
    c = Country("Testland")
    c.add_city("Alpha", 0, 0, 1, 1, 100, 2)
    c.add_city("Beta", 10, 5, 9, 5, 50, 3)
    c.add_city("Gamma", 4, -6, 4, -5, 75, 1)
    return c


@pytest.fixture
def atlas_root(tmp_path: Path) -> Path:
    """Temporary directory holding a countryctl.toml with the three test cities."""
    (tmp_path / CONFIG_FILENAME).write_text(ATLAS_TOML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def _isolated_atlas(atlas_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the atlas directory so the CLI discovers its config.

    Use via ``@pytest.mark.usefixtures("_isolated_atlas")`` on command test
    classes.
    """
    monkeypatch.chdir(atlas_root)
