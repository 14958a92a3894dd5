"""City — a named settlement with a center, a central station and demographics.

Value semantics throughout: a City owns private copies of its points,
getters hand out copies, and setters copy what they are given.

INVARIANT: ``residents >= 0`` and ``neighborhoods >= 1`` after every write.
Out-of-range values are clamped, never rejected.
"""

from __future__ import annotations

from typing import Any

from countryctl.domain.point import Point

MIN_RESIDENTS = 0
MIN_NEIGHBORHOODS = 1


def _clamp_residents(value: int) -> int:
    return MIN_RESIDENTS if value < MIN_RESIDENTS else value


def _clamp_neighborhoods(value: int) -> int:
    return MIN_NEIGHBORHOODS if value < MIN_NEIGHBORHOODS else value


class City:
    """A city record aggregating two points and two counters.

    Args:
        name: City name.
        center_x: X coordinate of the city center.
        center_y: Y coordinate of the city center.
        station_x: X coordinate of the central station.
        station_y: Y coordinate of the central station.
        residents: Number of residents; negative values become 0.
        neighborhoods: Number of neighborhoods; values below 1 become 1.
    """

    def __init__(
        self,
        name: str,
        center_x: float,
        center_y: float,
        station_x: float,
        station_y: float,
        residents: int,
        neighborhoods: int,
    ) -> None:
        self._name = name
        self._center = Point(center_x, center_y)
        self._station = Point(station_x, station_y)
        self._residents = _clamp_residents(residents)
        self._neighborhoods = _clamp_neighborhoods(neighborhoods)

    def copy(self) -> City:
        """Return a fully independent City with identical values."""
        return City(
            self._name,
            self._center.x,
            self._center.y,
            self._station.x,
            self._station.y,
            self._residents,
            self._neighborhoods,
        )

    # --- Accessors ---

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def center(self) -> Point:
        """A copy of the city center."""
        return self._center.copy()

    @center.setter
    def center(self, value: Point) -> None:
        self._center = value.copy()

    @property
    def station(self) -> Point:
        """A copy of the central station location."""
        return self._station.copy()

    @station.setter
    def station(self, value: Point) -> None:
        self._station = value.copy()

    @property
    def residents(self) -> int:
        return self._residents

    @residents.setter
    def residents(self, value: int) -> None:
        self._residents = _clamp_residents(value)

    @property
    def neighborhoods(self) -> int:
        return self._neighborhoods

    @neighborhoods.setter
    def neighborhoods(self, value: int) -> None:
        self._neighborhoods = _clamp_neighborhoods(value)

    # --- Behaviour ---

    def move_station(self, dx: float, dy: float) -> None:
        """Translate the central station in place."""
        self._station.move(dx, dy)

    def add_residents(self, delta: int) -> bool:
        """Add *delta* residents.

        Returns False (and sets residents to 0) when the result would be
        negative, True otherwise.
        """
        if self._residents + delta >= MIN_RESIDENTS:
            self._residents += delta
            return True
        self._residents = MIN_RESIDENTS
        return False

    def derive(self, new_name: str, dx: float, dy: float) -> City:
        """Found a new, empty city at this city's location shifted by (*dx*, *dy*).

        Residents and neighborhoods start from their minimums; only the
        geometry is inherited.
        """
        center = self._center.copy()
        center.move(dx, dy)
        station = self._station.copy()
        station.move(dx, dy)
        return City(
            new_name,
            center.x,
            center.y,
            station.x,
            station.y,
            MIN_RESIDENTS,
            MIN_NEIGHBORHOODS,
        )

    def center_to_station_distance(self) -> float:
        return self._center.distance(self._station)

    # --- Rendering ---

    def format(self) -> str:
        """Multi-line display rendering. Each line is newline-terminated."""
        return (
            f"City Name: {self._name}\n"
            f"City Center: {self._center}\n"
            f"Central Station: {self._station}\n"
            f"Number of Residents: {self._residents}\n"
            f"Number of Neighborhoods: {self._neighborhoods}\n"
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain-data snapshot for service payloads."""
        return {
            "name": self._name,
            "center": self._center.as_list(),
            "station": self._station.as_list(),
            "residents": self._residents,
            "neighborhoods": self._neighborhoods,
        }

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return (
            f"City(name={self._name!r}, center={self._center}, station={self._station}, "
            f"residents={self._residents}, neighborhoods={self._neighborhoods})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, City):
            return NotImplemented
        return (
            self._station == other._station
            and self._center == other._center
            and self._name == other._name
            and self._residents == other._residents
            and self._neighborhoods == other._neighborhoods
        )

    __hash__ = None  # type: ignore[assignment]
