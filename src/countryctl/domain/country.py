"""Country — the aggregate root owning a bounded, ordered list of cities.

Insertion order is the canonical order for every scan.  Duplicate city
names are allowed; lookups by name always resolve to the first match.

INVARIANT: ``0 <= num_cities <= capacity``.
INVARIANT: No City is shared with callers.  Cities are copied on the way
in and on the way out.
"""

from __future__ import annotations

from countryctl.domain.city import City

MAX_NUM_CITIES = 1000

NO_CITY_MESSAGE = "There is no city with the name {name}"
NO_NORTHERN_CITIES_MESSAGE = "There are no cities north of {name}"
NORTH_OF_HEADER = "The cities north of {name} are:\n\n"


class Country:
    """A named collection of at most *capacity* cities."""

    def __init__(self, name: str, *, capacity: int = MAX_NUM_CITIES) -> None:
        self._name = name
        self._capacity = capacity
        self._cities: list[City] = []

    # --- Basic accessors ---

    @property
    def name(self) -> str:
        return self._name

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def num_cities(self) -> int:
        return len(self._cities)

    def __len__(self) -> int:
        return len(self._cities)

    def get_cities(self) -> list[City]:
        """Copies of the held cities, in insertion order."""
        return [city.copy() for city in self._cities]

    @property
    def cities(self) -> list[City]:
        return self.get_cities()

    def get_city(self, name: str) -> City | None:
        """Copy of the first city called *name*, or None."""
        index = self.index_of(name)
        return None if index is None else self._cities[index].copy()

    def index_of(self, name: str) -> int | None:
        for i, city in enumerate(self._cities):
            if city.name == name:
                return i
        return None

    # --- City management ---

    def add_city(
        self,
        name: str,
        center_x: float,
        center_y: float,
        station_x: float,
        station_y: float,
        residents: int,
        neighborhoods: int,
    ) -> bool:
        """Append a new city. Returns False when the country is full."""
        if len(self._cities) >= self._capacity:
            return False
        city = City(name, center_x, center_y, station_x, station_y, residents, neighborhoods)
        self._cities.append(city.copy())
        return True

    def replace_city(self, index: int, city: City) -> None:
        """Overwrite the city at *index* with a copy of *city*.

        *index* must address a stored city (as returned by :meth:`index_of`);
        an out-of-range index raises :class:`IndexError`.
        """
        self._cities[index] = city.copy()

    def unify_cities(self, name1: str | None, name2: str | None) -> City | None:
        """Merge the first cities named *name1* and *name2*.

        The surviving entry is chosen by residents (tie keeps *name1*) or
        else by position (the earlier entry survives).  The other entry is
        removed from the country.  The merged city is returned and is not
        stored.  Returns None, leaving the country untouched, when either
        name is missing or both names are the same.
        """
        if name1 is None or name2 is None or name1 == name2:
            return None

        index1: int | None = None
        index2: int | None = None
        for i, city in enumerate(self._cities):
            if index1 is None and city.name == name1:
                index1 = i
            elif index2 is None and city.name == name2:
                index2 = i
            if index1 is not None and index2 is not None:
                break

        if index1 is None or index2 is None:
            return None

        first = self._cities[index1]
        second = self._cities[index2]
        if first.residents == second.residents:
            keep_index, remove_index = index1, index2
        else:
            keep_index, remove_index = min(index1, index2), max(index1, index2)
        kept = self._cities[keep_index]
        removed = self._cities[remove_index]

        unified = kept.copy()
        unified.name = f"{name1}-{name2}"
        unified.residents = first.residents + second.residents
        unified.neighborhoods = first.neighborhoods + second.neighborhoods
        unified.center = first.center.middle(second.center)
        if removed.station.is_left(kept.station):
            unified.station = removed.station

        del self._cities[remove_index]
        return unified

    # --- Statistics ---

    def get_num_of_residents(self) -> int:
        return sum(city.residents for city in self._cities)

    def longest_distance(self) -> float:
        """Greedy two-pointer scan for the longest center-to-center distance.

        Starts from the two ends of the list and moves whichever pointer
        improves the tracked maximum, stopping once the pointers meet or
        neither move helps.  This is a heuristic over insertion order and
        can miss the true maximum; see :meth:`farthest_pair_distance`.
        """
        if len(self._cities) < 2:
            return 0.0

        centers = [city.center for city in self._cities]
        max_distance = 0.0
        left = 0
        right = len(centers) - 1

        while left < right:
            max_distance = max(max_distance, centers[left].distance(centers[right]))
            moved = False

            left_next = centers[left + 1].distance(centers[right])
            if left_next > max_distance:
                max_distance = left_next
                left += 1
                moved = True

            if left < right:
                right_prev = centers[left].distance(centers[right - 1])
                if right_prev > max_distance:
                    max_distance = right_prev
                    right -= 1
                    moved = True

            if not moved:
                break

        return max_distance

    def farthest_pair_distance(self) -> float:
        """Exact maximum center-to-center distance over all pairs."""
        centers = [city.center for city in self._cities]
        max_distance = 0.0
        for i, a in enumerate(centers):
            for b in centers[i + 1 :]:
                max_distance = max(max_distance, a.distance(b))
        return max_distance

    # --- Geography ---

    def cities_north_of(self, name: str) -> str:
        """List every city whose center lies north of *name*'s center.

        Cities are visited alternately from both ends of the list toward
        the middle, and appear in that visiting order.
        """
        return self._render_north_of(name, self._north_of_indices(name))

    def _north_of_indices(self, name: str) -> list[int] | None:
        target_index = self.index_of(name)
        if target_index is None:
            return None
        target_center = self._cities[target_index].center

        found: list[int] = []
        left = 0
        right = len(self._cities) - 1
        while left <= right:
            if left != target_index and self._cities[left].center.is_above(target_center):
                found.append(left)
            left += 1
            if left > right:
                break
            if right != target_index and self._cities[right].center.is_above(target_center):
                found.append(right)
            right -= 1
        return found

    def _render_north_of(self, name: str, indices: list[int] | None) -> str:
        if indices is None:
            return NO_CITY_MESSAGE.format(name=name)
        if not indices:
            return NO_NORTHERN_CITIES_MESSAGE.format(name=name)
        parts = [NORTH_OF_HEADER.format(name=name)]
        parts.extend(self._cities[i].format() for i in indices)
        return "".join(parts)

    def cities_north_of_list(self, name: str) -> list[City] | None:
        """Structured form of :meth:`cities_north_of`; None if *name* is unknown."""
        indices = self._north_of_indices(name)
        if indices is None:
            return None
        return [self._cities[i].copy() for i in indices]

    def southernmost_city(self) -> City | None:
        if not self._cities:
            return None
        southernmost = self._cities[0]
        for city in self._cities[1:]:
            if city.center.is_under(southernmost.center):
                southernmost = city
        return southernmost.copy()

    # --- Rendering ---

    def format(self) -> str:
        header = f"Cities of {self._name}:\n\n"
        return header + "\n".join(city.format() for city in self._cities)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Country(name={self._name!r}, num_cities={len(self._cities)})"
