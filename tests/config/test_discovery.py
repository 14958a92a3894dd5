"""Tests for config discovery and loading."""

from pathlib import Path

import click
import pytest

from countryctl.config.discovery import CONFIG_FILENAME, find_config, load_config
from countryctl.config.models import AtlasConfig


class TestFindConfig:
    def test_finds_in_current_dir(self, atlas_root: Path) -> None:
        assert find_config(atlas_root) == (atlas_root / CONFIG_FILENAME).resolve()

    def test_walks_up(self, atlas_root: Path) -> None:
        child = atlas_root / "a" / "b"
        child.mkdir(parents=True)
        assert find_config(child) == (atlas_root / CONFIG_FILENAME).resolve()

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text('[country]\nname = "Env"\n')
        monkeypatch.setenv("COUNTRYCTL_CONFIG", str(custom))
        assert find_config(tmp_path / "anywhere") == custom

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv("COUNTRYCTL_CONFIG", str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestLoadConfig:
    def test_loads_from_file(self, atlas_root: Path) -> None:
        cfg = load_config(atlas_root / CONFIG_FILENAME)
        assert cfg.country.name == "Testland"
        assert len(cfg.cities) == 3
        assert cfg.cities[0].station == (1, 1)

    def test_discovers_from_cwd(self, atlas_root: Path) -> None:
        cfg = load_config(cwd=atlas_root)
        assert cfg.country.name == "Testland"

    def test_defaults_when_missing(self, tmp_path: Path) -> None:
        assert load_config(cwd=tmp_path) == AtlasConfig()

    def test_invalid_toml(self, tmp_path: Path) -> None:
        bad = tmp_path / CONFIG_FILENAME
        bad.write_text("[country\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            load_config(bad)


class TestExplicitPath:
    def test_explicit_wins_over_env(
        self, atlas_root: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("COUNTRYCTL_CONFIG", str(atlas_root / CONFIG_FILENAME))
        custom = tmp_path / "custom.toml"
        custom.write_text("")
        assert find_config(explicit=custom) == custom

    def test_missing_explicit_skips_walk_up(self, atlas_root: Path) -> None:
        assert find_config(atlas_root, explicit=atlas_root / "nope.toml") is None
