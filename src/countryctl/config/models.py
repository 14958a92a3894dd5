"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, countryctl.toml only contains
overrides plus the city records of the atlas.

Example::

    [country]
    name = "Israel"

    [[cities]]
    name = "Haifa"
    center = [2, 9]
    station = [3, 8]
    residents = 280000
    neighborhoods = 40
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from countryctl.domain.country import MAX_NUM_CITIES

Coordinates = tuple[int, int] | tuple[float, float]


class CountryConfig(BaseModel):
    """[country] section."""

    model_config = {"frozen": True}

    name: str = "my-country"
    capacity: int = Field(default=MAX_NUM_CITIES, ge=0)


class CityRecord(BaseModel):
    """One [[cities]] entry.

    Residents and neighborhoods are not range-checked here; the City
    model clamps them.  Integer coordinates stay integers so the atlas
    prints as written (``(0,0)``, not ``(0.0,0.0)``).
    """

    model_config = {"frozen": True}

    name: str
    center: Coordinates
    station: Coordinates
    residents: int = 0
    neighborhoods: int = 1

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("city name must not be blank")
        return value


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = 120
    color: bool = True


class AtlasConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    country: CountryConfig = Field(default_factory=CountryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    cities: list[CityRecord] = Field(default_factory=list)
