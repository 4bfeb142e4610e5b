# services/solvers/exact_solver.py
from __future__ import annotations
import logging
import math
from typing import List, Optional, Sequence

from core.interfaces import RouteSolver
from models.solvers import SolveRequest, SolveResult
from services.solvers.common import (
    LOOP_WARNING,
    compute_totals,
    derive_result,
    resolve_constraints,
    trivial_result,
)

logger = logging.getLogger(__name__)


def _regime(start: Optional[int], end: Optional[int], is_loop: bool) -> str:
    if is_loop:
        return "loop"
    if start is not None and end is not None:
        return "fixed-start-end"
    if start is not None:
        return "fixed-start"
    if end is not None:
        return "fixed-end"
    return "free"


def solve_exact(request: SolveRequest) -> SolveResult:
    """
    Exhaustive search over every visiting order consistent with the start/end
    constraints. Returns the route with the minimal total distance; ties keep
    the first route discovered (starts and remaining stops are tried in
    ascending index order).

    Runs in O(n!) and has no size guard of its own; callers gate it on size.
    """
    waypoints = request.waypoints
    n = len(waypoints)
    if n < 2:
        return trivial_result(waypoints, "exact")

    distances = request.matrix.distances
    start, end, is_loop = resolve_constraints(waypoints, request.start_id, request.end_id)
    fixed_end = None if is_loop else end

    warnings: List[str] = []
    if is_loop:
        warnings.append(LOOP_WARNING)

    logger.debug("exact search: n=%d regime=%s", n, _regime(start, end, is_loop))

    if start is not None:
        start_candidates = [start]
    else:
        # fixed end can never lead the route
        start_candidates = [i for i in range(n) if i != fixed_end]

    best_route: Optional[List[int]] = None
    best_distance = math.inf
    path: List[int] = []

    def _close(partial: float) -> None:
        nonlocal best_route, best_distance
        last = path[-1]
        if is_loop:
            tail = path[0]
        elif fixed_end is not None:
            tail = fixed_end
        else:
            tail = None

        if tail is None:
            total, route = partial, list(path)
        else:
            total, route = partial + distances[last][tail], path + [tail]

        if best_route is None or total < best_distance:
            best_distance = total
            best_route = route

    def _visit(remaining: Sequence[int], partial: float) -> None:
        if not remaining:
            _close(partial)
            return
        last = path[-1]
        for i, cand in enumerate(remaining):
            path.append(cand)
            _visit(remaining[:i] + remaining[i + 1 :], partial + distances[last][cand])
            path.pop()

    for s in start_candidates:
        # the pinned end is appended in _close, never visited as an interior step
        remaining = [i for i in range(n) if i != s and i != fixed_end]
        path.append(s)
        _visit(remaining, 0.0)
        path.pop()

    route = best_route
    totals = compute_totals(route, distances, request.matrix.durations)
    return derive_result(waypoints, route, totals, "exact", warnings)


class ExactSolver(RouteSolver):
    name = "exact"

    def solve(self, request: SolveRequest) -> SolveResult:
        return solve_exact(request)
