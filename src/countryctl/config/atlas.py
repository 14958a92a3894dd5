"""Build a Country from the ``[country]`` and ``[[cities]]`` config sections."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from countryctl.config.models import CityRecord, CountryConfig
from countryctl.domain.country import Country

log = structlog.get_logger(__name__)


def build_country(country_cfg: CountryConfig, records: Iterable[CityRecord]) -> Country:
    """Create the country and add every record in file order.

    Records past the configured capacity are dropped with a warning.
    """
    country = Country(country_cfg.name, capacity=country_cfg.capacity)
    dropped: list[str] = []
    for record in records:
        added = country.add_city(
            record.name,
            record.center[0],
            record.center[1],
            record.station[0],
            record.station[1],
            record.residents,
            record.neighborhoods,
        )
        if not added:
            dropped.append(record.name)
            continue
        if record.residents < 0 or record.neighborhoods < 1:
            log.warning(
                "city record clamped",
                city=record.name,
                residents=record.residents,
                neighborhoods=record.neighborhoods,
            )

    if dropped:
        log.warning(
            "country at capacity, cities dropped",
            country=country.name,
            capacity=country.capacity,
            dropped=dropped,
        )
    log.debug("country loaded", country=country.name, num_cities=country.num_cities)
    return country
