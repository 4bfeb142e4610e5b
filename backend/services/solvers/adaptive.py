# services/solvers/adaptive.py
from __future__ import annotations
import logging

from core.interfaces import RouteSolver
from models.solvers import AdaptiveOutcome, SolveRequest
from services.solvers.exact_solver import solve_exact
from services.solvers.heuristic_solver import (
    DEFAULT_MAX_PASSES,
    DEFAULT_MAX_STARTS,
    solve_heuristic,
)

logger = logging.getLogger(__name__)

EXACT_THRESHOLD = 9


def solve_adaptive(
    request: SolveRequest,
    *,
    exact_threshold: int = EXACT_THRESHOLD,
    max_passes: int = DEFAULT_MAX_PASSES,
    max_starts: int = DEFAULT_MAX_STARTS,
) -> AdaptiveOutcome:
    """Exact search up to `exact_threshold` waypoints, heuristic above it."""
    size = len(request.waypoints)
    if size <= exact_threshold:
        result = solve_exact(request)
        note = f"Exact strategy selected for {size} locations."
    else:
        result = solve_heuristic(request, max_passes=max_passes, max_starts=max_starts)
        note = f"Heuristic strategy selected for {size} locations."

    logger.info(note)
    return AdaptiveOutcome(**result.model_dump(), notes=[note])


class AdaptiveSolver(RouteSolver):
    name = "auto"

    def __init__(
        self,
        exact_threshold: int = EXACT_THRESHOLD,
        max_passes: int = DEFAULT_MAX_PASSES,
        max_starts: int = DEFAULT_MAX_STARTS,
    ):
        self.exact_threshold = exact_threshold
        self.max_passes = max_passes
        self.max_starts = max_starts

    def solve(self, request: SolveRequest) -> AdaptiveOutcome:
        return solve_adaptive(
            request,
            exact_threshold=self.exact_threshold,
            max_passes=self.max_passes,
            max_starts=self.max_starts,
        )
