"""Tests for building a Country from config records."""

from __future__ import annotations

import json
import logging

import pytest

from countryctl.config.atlas import build_country
from countryctl.config.logging import configure_logging
from countryctl.config.models import CityRecord, CountryConfig
from countryctl.domain.point import Point


def _record(name: str, x: float = 0, y: float = 0, **kwargs: int) -> CityRecord:
    return CityRecord(name=name, center=(x, y), station=(x, y), **kwargs)


class TestBuildCountry:
    def test_builds_in_file_order(self) -> None:
        country = build_country(
            CountryConfig(name="Israel"),
            [_record("Haifa", 2, 9, residents=10), _record("Eilat", 1, -40, residents=5)],
        )
        assert country.name == "Israel"
        assert [c.name for c in country.get_cities()] == ["Haifa", "Eilat"]
        assert country.get_cities()[1].center == Point(1, -40)
        assert country.get_num_of_residents() == 15

    def test_empty(self) -> None:
        country = build_country(CountryConfig(), [])
        assert country.num_cities == 0

    def test_records_clamped(self) -> None:
        country = build_country(CountryConfig(), [_record("Ghost", residents=-3, neighborhoods=0)])
        ghost = country.get_cities()[0]
        assert ghost.residents == 0
        assert ghost.neighborhoods == 1

    def test_capacity_drops_extra_records(self) -> None:
        country = build_country(
            CountryConfig(capacity=2), [_record("A"), _record("B"), _record("C")]
        )
        assert [c.name for c in country.get_cities()] == ["A", "B"]

    def test_dropped_records_logged(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        build_country(CountryConfig(name="Tiny", capacity=1), [_record("A"), _record("B")])
        lines = [json.loads(line) for line in capfd.readouterr().err.splitlines()]
        dropped = [line for line in lines if line["event"] == "country at capacity, cities dropped"]
        assert dropped
        assert dropped[0]["dropped"] == ["B"]
        assert dropped[0]["level"] == "warning"
        assert logging.getLogger("countryctl").level == logging.WARNING
