from __future__ import annotations
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from models.distance_matrix import CostMatrix  # solver consumes a CostMatrix
from models.waypoints import Waypoint

Strategy = Literal["exact", "heuristic"]
SolverMode = Literal["auto", "exact", "heuristic"]


class SolveRequest(BaseModel):
    # The matrix must already be computed and aligned with `waypoints`
    waypoints: List[Waypoint]
    matrix: CostMatrix
    start_id: Optional[str] = None
    end_id: Optional[str] = None


class SolveResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    ordered_points: List[Waypoint]
    ordered_ids: List[str]
    total_distance: float
    total_duration: Optional[float] = None
    strategy: Strategy
    warnings: List[str] = Field(default_factory=list)  # avoid shared mutable default


class AdaptiveOutcome(SolveResult):
    notes: List[str] = Field(default_factory=list)


class SolveBody(BaseModel):
    """Payload for POST /solver."""

    waypoints: List[Waypoint]
    # Omitted matrix -> haversine fallback built from the waypoints
    matrix: Optional[CostMatrix] = None
    start_id: Optional[str] = None
    end_id: Optional[str] = None
    mode: SolverMode = "auto"
    # Required to force an exact search above the exactness threshold
    confirm_exact: bool = False

    # Empty strings from form fields mean "unconstrained"
    @field_validator("start_id", "end_id", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("mode", mode="before")
    @classmethod
    def _normalize_mode(cls, v):
        if isinstance(v, str):
            v = v.lower().strip()
            # older clients send "brute-force"
            if v in ("brute-force", "bruteforce", "brute_force"):
                return "exact"
        return v
