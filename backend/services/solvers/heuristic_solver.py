# services/solvers/heuristic_solver.py
from __future__ import annotations
import logging
import math
from typing import List, Optional, Sequence

from core.interfaces import RouteSolver
from models.solvers import SolveRequest, SolveResult
from services.solvers.common import (
    LOOP_WARNING,
    Totals,
    compute_totals,
    derive_result,
    resolve_constraints,
    trivial_result,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_PASSES = 24
DEFAULT_MAX_STARTS = 5
IMPROVEMENT_EPS = 1e-6
MULTI_START_WARNING = "Heuristic evaluated multiple starting tours to refine the route."

Matrix = Sequence[Sequence[float]]


# ----------------------------
# Start diversification
# ----------------------------
def average_distances(distances: Matrix) -> List[float]:
    """Mean outgoing distance of every node to all others."""
    n = len(distances)
    out: List[float] = []
    for i in range(n):
        total = 0.0
        for j in range(n):
            if i != j:
                total += distances[i][j]
        out.append(total / max(1, n - 1))
    return out


def start_candidates(
    distances: Matrix,
    fixed_start: Optional[int],
    fixed_end: Optional[int],
    max_starts: int = DEFAULT_MAX_STARTS,
) -> List[int]:
    """
    Pick up to `max_starts` structurally different start nodes: the lowest mean
    distance, the highest, the median, then fill-ins by ascending mean.
    A fixed start yields exactly one candidate.
    """
    if fixed_start is not None:
        return [fixed_start]

    indices = [i for i in range(len(distances)) if i != fixed_end]
    if not indices:
        return [fixed_end] if fixed_end is not None else [0]

    averages = average_distances(distances)
    ranked = sorted(indices, key=lambda i: averages[i])  # stable on ties

    picked: List[int] = []

    def _add(idx: int) -> None:
        if idx not in picked:
            picked.append(idx)

    _add(ranked[0])
    _add(ranked[-1])
    _add(ranked[len(ranked) // 2])
    for idx in ranked:
        if len(picked) >= max_starts:
            break
        _add(idx)
    return picked[:max(1, max_starts)]


# ----------------------------
# Construction
# ----------------------------
def nearest_neighbour_route(
    distances: Matrix, start: int, fixed_end: Optional[int] = None
) -> List[int]:
    """
    Greedy tour from `start`: always step to the closest unvisited node (lowest
    index on ties). A fixed end is held back and appended last.
    """
    unvisited = [i for i in range(len(distances)) if i != start and i != fixed_end]
    route = [start]
    while unvisited:
        current = route[-1]
        nxt = min(unvisited, key=lambda j: distances[current][j])
        route.append(nxt)
        unvisited.remove(nxt)
    if fixed_end is not None and route[-1] != fixed_end:
        route.append(fixed_end)
    return route


# ----------------------------
# Local search
# ----------------------------
def two_opt(
    route: Sequence[int],
    distances: Matrix,
    max_passes: int = DEFAULT_MAX_PASSES,
    locked_start: bool = False,
    locked_end: bool = False,
) -> List[int]:
    """
    First-improvement 2-opt on a private copy of `route`.

    For edges (a,b)=(r[i-1],r[i]) and (c,d)=(r[k],r[k+1]) the segment r[i..k]
    is reversed when d(a,c)+d(b,d) beats d(a,b)+d(c,d) by more than
    IMPROVEMENT_EPS. The first edge is never broken when the start is locked,
    nor the last edge when the end is locked.
    """
    tour = list(route)
    n = len(tour)
    for _ in range(max_passes):
        improved = False
        for i in range(1, n - 2):
            if locked_start and i == 1:
                continue
            for k in range(i + 1, n - 1):
                if locked_end and k + 1 >= n - 1:
                    continue
                a, b = tour[i - 1], tour[i]
                c, d = tour[k], tour[k + 1]
                old = distances[a][b] + distances[c][d]
                new = distances[a][c] + distances[b][d]
                if new < old - IMPROVEMENT_EPS:
                    tour[i : k + 1] = reversed(tour[i : k + 1])
                    improved = True
        if not improved:
            break
    return tour


# ----------------------------
# Entry point
# ----------------------------
def solve_heuristic(
    request: SolveRequest,
    *,
    max_passes: int = DEFAULT_MAX_PASSES,
    max_starts: int = DEFAULT_MAX_STARTS,
) -> SolveResult:
    """
    Nearest-neighbour construction from diversified starts, refined by 2-opt.
    Deterministic; no optimality guarantee.
    """
    waypoints = request.waypoints
    n = len(waypoints)
    if n < 2:
        return trivial_result(waypoints, "heuristic")

    distances = request.matrix.distances
    durations = request.matrix.durations
    fixed_start, fixed_end, is_loop = resolve_constraints(
        waypoints, request.start_id, request.end_id
    )

    if is_loop:
        # Open tour over the other stops, pinned to the start on both sides,
        # then closed back to the start.
        base = nearest_neighbour_route(distances, fixed_start)
        refined = two_opt(base, distances, max_passes, locked_start=True, locked_end=True)
        loop_route = refined + [fixed_start]
        logger.debug("heuristic loop: n=%d start=%d", n, fixed_start)
        totals = compute_totals(loop_route, distances, durations)
        return derive_result(waypoints, loop_route, totals, "heuristic", [LOOP_WARNING])

    candidates = start_candidates(distances, fixed_start, fixed_end, max_starts)
    logger.debug("heuristic search: n=%d candidates=%s", n, candidates)

    best_route: Optional[List[int]] = None
    best_totals = Totals(total_distance=math.inf)
    for s in candidates:
        base = nearest_neighbour_route(distances, s, fixed_end)
        refined = two_opt(
            base,
            distances,
            max_passes,
            locked_start=fixed_start is not None,
            locked_end=fixed_end is not None,
        )
        totals = compute_totals(refined, distances, durations)
        if totals.total_distance < best_totals.total_distance:
            best_route, best_totals = refined, totals

    if best_route is None:
        best_route = nearest_neighbour_route(distances, candidates[0], fixed_end)
        best_totals = compute_totals(best_route, distances, durations)

    warnings = [MULTI_START_WARNING] if len(candidates) > 1 else []
    return derive_result(waypoints, best_route, best_totals, "heuristic", warnings)


class HeuristicSolver(RouteSolver):
    name = "heuristic"

    def __init__(
        self, max_passes: int = DEFAULT_MAX_PASSES, max_starts: int = DEFAULT_MAX_STARTS
    ):
        self.max_passes = max_passes
        self.max_starts = max_starts

    def solve(self, request: SolveRequest) -> SolveResult:
        return solve_heuristic(
            request, max_passes=self.max_passes, max_starts=self.max_starts
        )
