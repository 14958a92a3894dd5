"""CountryService — the operations the CLI exposes over a loaded Country.

Each public method wraps one domain operation and translates its
boolean / None / message outcome into a ServiceResult.
"""

from __future__ import annotations

import logging
from typing import Any

from countryctl.domain.country import NO_CITY_MESSAGE
from countryctl.services.base import BaseService
from countryctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class CountryService(BaseService):
    """City management and geographic queries on a single country."""

    # ------------------------------------------------------------------
    # City management
    # ------------------------------------------------------------------

    def add_city(
        self,
        name: str,
        center: tuple[float, float],
        station: tuple[float, float],
        residents: int = 0,
        neighborhoods: int = 1,
    ) -> ServiceResult:
        """Add a city given its center and station as ``(x, y)`` pairs."""
        op = "add_city"
        (cx, cy), (sx, sy) = center, station
        added = self._country.add_city(name, cx, cy, sx, sy, residents, neighborhoods)
        if not added:
            return self._fail(
                op,
                "CAPACITY_EXCEEDED",
                f"{self._country.name} already holds {self._country.capacity} cities",
                {"capacity": self._country.capacity},
            )
        city = self._country.get_cities()[-1]
        logger.debug("Added city %s to %s", name, self._country.name)
        warnings: list[str] = []
        if residents < 0:
            warnings.append(f"Residents for {name} clamped to 0")
        if neighborhoods < 1:
            warnings.append(f"Neighborhoods for {name} clamped to 1")
        return self._ok(op, city.to_dict(), warnings=warnings)

    def list_cities(self) -> ServiceResult:
        items = [city.to_dict() for city in self._country.get_cities()]
        return self._ok(
            "list_cities",
            {
                "country": self._country.name,
                "count": len(items),
                "items": items,
                "text": self._country.format(),
            },
        )

    def show_city(self, name: str) -> ServiceResult:
        op = "show_city"
        city = self._country.get_city(name)
        if city is None:
            return self._not_found(op, name)
        data = city.to_dict()
        data["center_to_station"] = city.center_to_station_distance()
        return self._ok(op, data)

    def unify_cities(self, name1: str, name2: str) -> ServiceResult:
        op = "unify_cities"
        missing = [n for n in (name1, name2) if self._country.index_of(n) is None]
        if missing:
            return self._not_found(op, missing[0])
        if name1 == name2:
            return self._fail(
                op, "SAME_CITY", f"Cannot unify {name1} with itself", {"name": name1}
            )

        unified = self._country.unify_cities(name1, name2)
        if unified is None:
            return self._not_found(op, name1)
        logger.debug("Unified %s and %s into %s", name1, name2, unified.name)
        return self._ok(op, unified.to_dict())

    def add_residents(self, name: str, delta: int) -> ServiceResult:
        op = "add_residents"
        index = self._country.index_of(name)
        if index is None:
            return self._not_found(op, name)
        city = self._country.get_cities()[index]
        applied = city.add_residents(delta)
        self._country.replace_city(index, city)
        warnings: list[str] = []
        if not applied:
            warnings.append(f"Residents of {name} would drop below zero; clamped to 0")
        return self._ok(op, city.to_dict(), warnings=warnings)

    def move_station(self, name: str, dx: float, dy: float) -> ServiceResult:
        op = "move_station"
        index = self._country.index_of(name)
        if index is None:
            return self._not_found(op, name)
        city = self._country.get_cities()[index]
        city.move_station(dx, dy)
        self._country.replace_city(index, city)
        return self._ok(op, city.to_dict())

    def derive_city(
        self,
        source: str,
        new_name: str,
        dx: float,
        dy: float,
        *,
        add: bool = False,
    ) -> ServiceResult:
        """Found a new city offset from *source*; optionally add it to the country."""
        op = "derive_city"
        city = self._country.get_city(source)
        if city is None:
            return self._not_found(op, source)
        derived = city.derive(new_name, dx, dy)
        if add:
            center, station = derived.center, derived.station
            added = self._country.add_city(
                derived.name,
                center.x,
                center.y,
                station.x,
                station.y,
                derived.residents,
                derived.neighborhoods,
            )
            if not added:
                return self._fail(
                    op,
                    "CAPACITY_EXCEEDED",
                    f"{self._country.name} already holds {self._country.capacity} cities",
                    {"capacity": self._country.capacity},
                )
        data = derived.to_dict()
        data["added"] = add
        return self._ok(op, data)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def total_residents(self) -> ServiceResult:
        return self._ok(
            "total_residents",
            {"country": self._country.name, "residents": self._country.get_num_of_residents()},
        )

    def longest_distance(self, *, exhaustive: bool = False) -> ServiceResult:
        if exhaustive:
            distance = self._country.farthest_pair_distance()
        else:
            distance = self._country.longest_distance()
        return self._ok(
            "longest_distance",
            {
                "distance": distance,
                "method": "exhaustive" if exhaustive else "two-pointer",
            },
        )

    def cities_north_of(self, name: str) -> ServiceResult:
        op = "cities_north_of"
        text = self._country.cities_north_of(name)
        cities = self._country.cities_north_of_list(name)
        if cities is None:
            return self._not_found(op, name, text)
        items = [city.to_dict() for city in cities]
        return self._ok(op, {"reference": name, "count": len(items), "items": items, "text": text})

    def southernmost_city(self) -> ServiceResult:
        op = "southernmost_city"
        city = self._country.southernmost_city()
        if city is None:
            return self._fail(op, "EMPTY_COUNTRY", f"{self._country.name} has no cities")
        return self._ok(op, city.to_dict())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _not_found(self, op: str, name: str, message: str | None = None) -> ServiceResult:
        detail: dict[str, Any] = {"name": name}
        return self._fail(
            op,
            "NOT_FOUND",
            message or NO_CITY_MESSAGE.format(name=name),
            detail,
        )
