"""Exhaustive grid sweep: solve every point configuration inside a square.

Each axis runs from ``lower`` to ``upper`` inclusive and advances with
:func:`next_upper`, so every representable double in the range is visited.
With ``single_precision`` the axes step through single-precision values
instead, via :func:`next_upper_single`.
Over the default ``[-1, 1]`` square that is astronomically many values; the
sweep is only practical over tiny ranges.
"""

from __future__ import annotations

import math
from typing import Callable, Iterator, Optional

from ..config import settings
from ..models.domain import BestTour, Point
from .floats import next_upper, next_upper_single, round_single
from .tours.service import solve_tour

ResultCallback = Callable[[list[Point], BestTour], None]
Step = Callable[[float], float]


def iter_axis(lower: float, upper: float, step: Step = next_upper) -> Iterator[float]:
    value = lower
    while value <= upper:
        yield value
        value = step(value)


def _check_bounds(lower: float, upper: float) -> None:
    if not (math.isfinite(lower) and math.isfinite(upper)):
        raise ValueError(f"Grid bounds must be finite, got [{lower}, {upper}].")


def run_inner(
    count: int,
    positions: list[Point],
    *,
    lower: float,
    upper: float,
    on_result: Optional[ResultCallback] = None,
    report_improvements: bool | None = None,
    step: Step = next_upper,
) -> int:
    """Fill ``positions[:count]`` with every grid point and solve each full buffer.

    ``positions[count - 1]`` is assigned at this level, so the buffer fills
    from the back. Returns the number of configurations solved.
    """
    if count == 0:
        best = solve_tour(positions, report_improvements=report_improvements)
        if on_result is not None:
            on_result(list(positions), best)
        return 1

    solved = 0
    for x in iter_axis(lower, upper, step):
        for y in iter_axis(lower, upper, step):
            positions[count - 1] = Point(x, y)
            solved += run_inner(
                count - 1,
                positions,
                lower=lower,
                upper=upper,
                on_result=on_result,
                report_improvements=report_improvements,
                step=step,
            )
    return solved


def run(
    count: int,
    *,
    lower: float | None = None,
    upper: float | None = None,
    on_result: Optional[ResultCallback] = None,
    report_improvements: bool | None = None,
    single_precision: bool | None = None,
) -> int:
    """Solve every configuration of ``count`` points on the swept grid.

    Bounds default to ``settings.grid_lower`` and ``settings.grid_upper``, and
    the stepping precision to ``settings.grid_single_precision``. In single
    precision the lower bound is first rounded to the nearest single value.

    Raises:
        ValueError: if ``count`` is below one or a bound is not finite.
    """
    if count < 1:
        raise ValueError(f"Grid point count must be at least 1, got {count}.")
    lower = settings.grid_lower if lower is None else lower
    upper = settings.grid_upper if upper is None else upper
    _check_bounds(lower, upper)
    if single_precision is None:
        single_precision = settings.grid_single_precision
    if single_precision:
        step = next_upper_single
        lower = round_single(lower)
    else:
        step = next_upper

    positions = [Point(0.0, 0.0) for _ in range(count)]
    return run_inner(
        count,
        positions,
        lower=lower,
        upper=upper,
        on_result=on_result,
        report_improvements=report_improvements,
        step=step,
    )
