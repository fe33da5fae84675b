"""Domain models for points, routes and the best tour found so far."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True, slots=True)
class Point:
    """An immutable 2-D coordinate."""

    x: float
    y: float

    def distance(self, other: Point) -> float:
        return math.sqrt(self.distance_sq(other))

    def distance_sq(self, other: Point) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return (dx * dx) + (dy * dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


Route = List[Point]


@dataclass(slots=True)
class BestTour:
    """Shortest closed tour seen during one enumeration.

    ``route`` is always an independent copy whose closed-loop length is
    ``distance``. The initial state is an infinite distance and an empty route.
    """

    distance: float = math.inf
    route: Route = field(default_factory=list)
    evaluated: int = 0
