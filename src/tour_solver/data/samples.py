"""Built-in sample point set."""

from __future__ import annotations

from ..models.domain import Point

SAMPLE_POINTS: tuple[Point, ...] = (
    Point(-1.0, -1.0),
    Point(-1.0, 1.0),
    Point(1.0, -1.0),
    Point(1.0, 1.0),
    Point(0.5, 1.0),
    Point(1.0, 0.5),
    Point(0.5, 0.5),
    Point(-1.0, -0.5),
    Point(-0.5, -0.5),
    Point(-0.5, -1.0),
    Point(-0.5, 0.5),
    Point(1.0, -0.5),
    Point(-1.0, 0.5),
)


def sample_points(count: int | None = None) -> list[Point]:
    """Return the first ``count`` sample points (all of them when ``count`` is None)."""
    if count is None:
        return list(SAMPLE_POINTS)
    if count < 1:
        raise ValueError(f"Sample point count must be at least 1, got {count}.")
    return list(SAMPLE_POINTS[:count])
