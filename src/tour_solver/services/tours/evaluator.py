"""Closed-tour scoring and best-tour tracking."""

from __future__ import annotations

import logging
from typing import Sequence

from ...config import settings
from ...models.domain import BestTour, Point


def route_distance(route: Sequence[Point]) -> float:
    """Sum of consecutive edge lengths plus the closing edge back to the start."""
    total = 0.0
    for a, b in zip(route, route[1:]):
        total += a.distance(b)
    total += route[-1].distance(route[0])
    return total


class TourEvaluator:
    """Observer for :func:`permute` that keeps the shortest closed tour.

    Ties keep the route found first. NaN distances never compare smaller, so
    they can not replace a best tour.
    """

    def __init__(self, *, report_improvements: bool | None = None) -> None:
        self.best = BestTour()
        self.report_improvements = (
            settings.report_improvements if report_improvements is None else report_improvements
        )

    def __call__(self, route: Sequence[Point]) -> None:
        total = route_distance(route)
        self.best.evaluated += 1
        if total < self.best.distance:
            if self.report_improvements:
                previous = self.best.distance
                logging.info(
                    f"Found new smallest distance (Improved by {previous - total}: {previous} -> {total})"
                )
            self.best.distance = total
            # The engine mutates ``route`` after this call returns.
            self.best.route = list(route)
