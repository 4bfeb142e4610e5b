# services/solvers/common.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from models.solvers import SolveResult, Strategy
from models.waypoints import Waypoint

TOO_FEW_POINTS_WARNING = "Provide at least two locations to optimise an itinerary."
LOOP_WARNING = "Start and end points are identical; treating itinerary as a loop."


@dataclass(frozen=True)
class Totals:
    total_distance: float
    total_duration: Optional[float] = None


def compute_totals(
    route: Sequence[int],
    distances: Sequence[Sequence[float]],
    durations: Optional[Sequence[Sequence[float]]] = None,
) -> Totals:
    """Sum edge costs along consecutive pairs of `route` (no wraparound)."""
    dist = 0.0
    secs: Optional[float] = 0.0 if durations is not None else None
    for i in range(len(route) - 1):
        a, b = route[i], route[i + 1]
        dist += distances[a][b]
        if secs is not None:
            secs += durations[a][b]
    return Totals(total_distance=dist, total_duration=secs)


def derive_result(
    waypoints: Sequence[Waypoint],
    route: Sequence[int],
    totals: Totals,
    strategy: Strategy,
    warnings: List[str],
) -> SolveResult:
    # Callers guarantee every index in `route` is valid
    ordered = [waypoints[i] for i in route]
    return SolveResult(
        ordered_points=ordered,
        ordered_ids=[wp.id for wp in ordered],
        total_distance=totals.total_distance,
        total_duration=totals.total_duration,
        strategy=strategy,
        warnings=list(warnings),
    )


def trivial_result(waypoints: Sequence[Waypoint], strategy: Strategy) -> SolveResult:
    """Passthrough for fewer than two waypoints."""
    return SolveResult(
        ordered_points=list(waypoints),
        ordered_ids=[wp.id for wp in waypoints],
        total_distance=0.0,
        total_duration=0.0,
        strategy=strategy,
        warnings=[TOO_FEW_POINTS_WARNING],
    )


def resolve_constraints(
    waypoints: Sequence[Waypoint],
    start_id: Optional[str],
    end_id: Optional[str],
) -> Tuple[Optional[int], Optional[int], bool]:
    """
    Map start/end ids to indices. Ids that match no waypoint resolve to None
    (unconstrained). Returns (start_index, end_index, is_loop).
    """
    id_to_index: Dict[str, int] = {}
    for idx, wp in enumerate(waypoints):
        id_to_index.setdefault(wp.id, idx)

    start = id_to_index.get(start_id) if start_id is not None else None
    end = id_to_index.get(end_id) if end_id is not None else None
    is_loop = start is not None and end is not None and start == end
    return start, end, is_loop
