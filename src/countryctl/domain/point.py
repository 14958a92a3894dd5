"""Point — a mutable 2D coordinate used for city centers and stations.

Directional predicates follow map conventions: larger ``y`` is further
north, smaller ``x`` is further west.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Point:
    """A 2D coordinate with distance, midpoint and direction helpers."""

    x: float
    y: float

    def copy(self) -> Point:
        """Return an independent copy of this point."""
        return Point(self.x, self.y)

    def distance(self, other: Point) -> float:
        """Euclidean distance to *other*."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def middle(self, other: Point) -> Point:
        """Return a new point halfway between this point and *other*."""
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)

    def is_above(self, other: Point) -> bool:
        return self.y > other.y

    def is_under(self, other: Point) -> bool:
        return other.is_above(self)

    def is_left(self, other: Point) -> bool:
        return self.x < other.x

    def is_right(self, other: Point) -> bool:
        return other.is_left(self)

    def move(self, dx: float, dy: float) -> None:
        """Translate this point in place by (*dx*, *dy*)."""
        self.x += dx
        self.y += dy

    def as_list(self) -> list[float]:
        return [self.x, self.y]

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
