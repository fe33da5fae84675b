"""Command line entry point for the tour solver."""

from __future__ import annotations

import argparse
import logging
import sys

from .config import settings
from .data.samples import sample_points
from .models.domain import BestTour, Point
from .services import grid
from .services.tours.service import solve_tour


def _format_route(route: list[Point]) -> str:
    return " -> ".join(str(point) for point in route)


def cmd_solve(args: argparse.Namespace) -> None:
    if args.point:
        points = [Point(x, y) for x, y in args.point]
    else:
        count = settings.sample_point_count if args.samples is None else args.samples
        points = sample_points(count)
    best = solve_tour(points, report_improvements=not args.quiet)
    print(f"Best route: {_format_route(best.route)}")
    print(f"Distance: {best.distance}")
    print(f"Orderings evaluated: {best.evaluated}")


def cmd_grid(args: argparse.Namespace) -> None:
    def _report(positions: list[Point], best: BestTour) -> None:
        print(f"{_format_route(positions)} => {best.distance}")

    solved = grid.run(
        args.count,
        lower=args.lower,
        upper=args.upper,
        on_result=_report,
        report_improvements=not args.quiet,
        single_precision=args.single or None,
    )
    print(f"Configurations solved: {solved}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tour-solver", description="Brute-force closed tour solver")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=settings.log_level,
        help="Logging level",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    solve_p = sub.add_parser("solve", help="Solve one point set")
    solve_p.add_argument(
        "--point",
        type=float,
        nargs=2,
        action="append",
        metavar=("X", "Y"),
        help="Point to visit (repeatable); defaults to the built-in sample set",
    )
    solve_p.add_argument("--samples", type=int, help="How many sample points to use when no --point is given")
    solve_p.add_argument("--quiet", action="store_true", help="Do not log intermediate improvements")
    solve_p.set_defaults(func=cmd_solve)

    grid_p = sub.add_parser("grid", help="Solve every configuration of COUNT points on the swept grid")
    grid_p.add_argument("--count", type=int, required=True)
    grid_p.add_argument("--lower", type=float, help="Lower axis bound (default from settings)")
    grid_p.add_argument("--upper", type=float, help="Upper axis bound (default from settings)")
    grid_p.add_argument("--single", action="store_true", help="Step the axes through single-precision values")
    grid_p.add_argument("--quiet", action="store_true", help="Do not log intermediate improvements")
    grid_p.set_defaults(func=cmd_grid)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s: %(message)s")
    try:
        args.func(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
