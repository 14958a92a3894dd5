"""CountrySettings: one frozen object merging every configuration layer.

Precedence, strongest first: CLI flags (init kwargs), ``COUNTRYCTL_*``
environment variables (``__`` separates nesting, e.g.
``COUNTRYCTL_COUNTRY__NAME``), the atlas TOML file, model defaults.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from countryctl.config.discovery import find_config, load_config
from countryctl.config.models import CityRecord, CountryConfig, OutputConfig

# Atlas data parsed by from_cli(), visible to the source during construction.
_pending = threading.local()


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feeds the parsed atlas file into pydantic-settings as the TOML layer."""

    def __init__(self, settings_cls: type[BaseSettings], data: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._data = data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


class CountrySettings(BaseSettings):
    """Settings for a single countryctl invocation.

    Attributes:
        root: Directory of the loaded atlas file, else the working directory.
        config_path: The atlas file that was read, or None.
        country: The ``[country]`` table.
        cities: The ``[[cities]]`` records, in file order.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "COUNTRYCTL_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    country: CountryConfig = Field(default_factory=CountryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    cities: list[CityRecord] = Field(default_factory=list)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        atlas = TomlSettingsSource(settings_cls, getattr(_pending, "data", None) or {})
        return init_settings, env_settings, atlas

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> CountrySettings:
        """Build settings for the CLI root group.

        *config_path* (``--config``) bypasses discovery.  Validation
        failures surface as :class:`click.ClickException` so the CLI exits 1
        with a readable message.
        """
        atlas_path = find_config(root, explicit=config_path)
        if root is None:
            root = atlas_path.parent if atlas_path else Path.cwd()

        try:
            # Validated against AtlasConfig; only the keys the file sets are passed on.
            atlas = load_config(atlas_path) if atlas_path else None
            _pending.data = atlas.model_dump(exclude_unset=True) if atlas else {}
            return cls(root=root, config_path=atlas_path, **cli_flags)
        except ValidationError as exc:
            raise click.ClickException(
                f"Invalid configuration in {atlas_path or 'environment'}: {exc}"
            ) from exc
        finally:
            _pending.data = None
