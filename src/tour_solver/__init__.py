"""Brute-force solver for the smallest travelling-salesman instances."""

from .models.domain import BestTour, Point
from .services.permutations import iter_permutations, permute
from .services.tours.service import solve_tour

__all__ = ["BestTour", "Point", "iter_permutations", "permute", "solve_tour"]
