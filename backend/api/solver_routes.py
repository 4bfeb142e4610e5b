# api/solver_routes.py
import logging
import math
from typing import List

from fastapi import APIRouter, HTTPException, Query

from adapters.offline.haversine_adapter import build_haversine_matrix
from api._resp import fail, ok
from config import get_settings
from core.exceptions import SolverRequestError
from models.distance_matrix import CostMatrix
from models.solvers import SolveBody, SolveRequest
from models.waypoints import Waypoint
from services.estimate import estimate_exact_seconds, format_duration_estimate
from services.solver_factory import get_solver

logger = logging.getLogger(__name__)

router = APIRouter()

FALLBACK_WARNING = (
    "Fell back to Haversine distances. Results are approximations and ignore "
    "routing constraints."
)


def _check_waypoints(waypoints: List[Waypoint]) -> None:
    seen = set()
    for wp in waypoints:
        if wp.id in seen:
            raise SolverRequestError(f"duplicate waypoint id '{wp.id}'")
        seen.add(wp.id)


def _check_matrix(matrix: CostMatrix, n: int) -> None:
    if not matrix.is_square(n):
        raise SolverRequestError(
            f"matrix must be {n}x{n} (distances and durations aligned with waypoints)"
        )
    for row in matrix.distances:
        for v in row:
            if v < 0 or math.isnan(v):
                raise SolverRequestError("matrix distances must be non-negative numbers")


def _estimate(n: int) -> float:
    s = get_settings()
    return estimate_exact_seconds(
        n,
        seconds_per_permutation=s.EXACT_SECONDS_PER_PERMUTATION,
        cap=s.EXACT_PERMUTATION_CAP,
    )


@router.post("/solver")
def solve(body: SolveBody):
    # Plain `def`: FastAPI runs this in its threadpool, so a long exact
    # search never blocks the event loop.
    try:
        n = len(body.waypoints)
        _check_waypoints(body.waypoints)

        extra_warnings: List[str] = []
        matrix = body.matrix
        if matrix is None:
            matrix = build_haversine_matrix(body.waypoints)
            extra_warnings.append(FALLBACK_WARNING)
        _check_matrix(matrix, n)

        seconds = _estimate(n)
        label = format_duration_estimate(seconds)
        threshold = get_settings().EXACT_THRESHOLD
        if body.mode == "exact" and n > threshold and not body.confirm_exact:
            fail(
                400,
                f"Exact search over {n} locations is estimated at {label}; "
                f"set confirm_exact=true to run it anyway.",
            )

        solver = get_solver(body.mode)
        request = SolveRequest(
            waypoints=body.waypoints,
            matrix=matrix,
            start_id=body.start_id,
            end_id=body.end_id,
        )
        result = solver.solve(request)
        logger.info(
            "solved %d locations with %s: distance=%.3f",
            n,
            result.strategy,
            result.total_distance,
        )

        notes = list(getattr(result, "notes", []) or [])
        data = result.model_dump(exclude={"notes"})
        data["warnings"] = extra_warnings + data["warnings"]
        return ok(data, notes=notes, provider=matrix.provider, estimate=label)

    except HTTPException:
        raise
    except (SolverRequestError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("solve failed")
        raise HTTPException(status_code=500, detail=f"Internal error: {e}")


@router.get("/solver/estimate", summary="Estimate exact-search wall-clock time")
def estimate(points: int = Query(..., ge=0)):
    seconds = _estimate(points)
    return ok(
        {
            "points": points,
            "seconds": None if math.isinf(seconds) else seconds,
            "label": format_duration_estimate(seconds),
            "exact_recommended": points <= get_settings().EXACT_THRESHOLD,
        }
    )
