"""Tour solving orchestration service."""

from __future__ import annotations

import logging
import time
from typing import Sequence

from ...config import settings
from ...models.domain import BestTour, Point
from ...schemas.tours import PointModel, TourRequest, TourResponse
from ..permutations import permute
from .evaluator import TourEvaluator


def _format_points(points: Sequence[Point]) -> str:
    return "[" + ", ".join(str(point) for point in points) + "]"


def solve_tour(points: Sequence[Point], *, report_improvements: bool | None = None) -> BestTour:
    """Evaluate every ordering of ``points`` and return the shortest closed tour.

    Ties keep the first ordering found. If every ordering scores NaN the
    result keeps its initial state: infinite distance and an empty route.

    Raises:
        ValueError: if ``points`` is empty.
    """
    if not points:
        raise ValueError("At least one point is required to solve a tour.")

    evaluator = TourEvaluator(report_improvements=report_improvements)
    permute(points, evaluator)
    best = evaluator.best

    logging.info(
        f"Best route for {_format_points(points)} is {_format_points(best.route)} "
        f"with distance {best.distance}"
    )
    return best


def solve_request(payload: TourRequest) -> TourResponse:
    points = [Point(point.x, point.y) for point in payload.points]
    if len(points) > settings.max_points:
        raise ValueError(
            f"Too many points: {len(points)} (at most {settings.max_points} can be enumerated per request)."
        )

    started = time.perf_counter()
    best = solve_tour(points, report_improvements=payload.report_improvements)
    elapsed = time.perf_counter() - started

    return TourResponse(
        distance=best.distance,
        route=[PointModel(x=point.x, y=point.y) for point in best.route],
        point_count=len(points),
        evaluated=best.evaluated,
        elapsed_seconds=elapsed,
    )
