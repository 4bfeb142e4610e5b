from __future__ import annotations
from typing import Dict, List, Any

_SOLVER_CAPS: Dict[str, Dict[str, Any]] = {
    "exact": {
        "optimal": True,
        "complexity": "O(n!)",
        "required": ["waypoints", "matrix.distances|coordinates"],
        "optional": ["matrix.durations", "start_id", "end_id", "confirm_exact"],
    },
    "heuristic": {
        "optimal": False,
        "complexity": "O(k * n^2 * passes)",
        "required": ["waypoints", "matrix.distances|coordinates"],
        "optional": ["matrix.durations", "start_id", "end_id"],
    },
    "auto": {
        "optimal": "below exact_threshold",
        "complexity": "exact or heuristic by size",
        "required": ["waypoints", "matrix.distances|coordinates"],
        "optional": ["matrix.durations", "start_id", "end_id"],
    },
}

_ADAPTER_CAPS: Dict[str, Dict[str, Any]] = {
    "haversine": {"provides": ["matrix.distances"], "units": {"distance": "m"}},
}


def filter_registered(
    registered_solvers: List[str],
    registered_adapters: List[str],
    exact_threshold: int,
) -> Dict[str, Any]:
    solvers = []
    for name in sorted(registered_solvers):
        caps = _SOLVER_CAPS.get(name)
        if caps:
            solvers.append({"name": name, **caps})

    adapters = []
    for name in sorted(registered_adapters):
        caps = _ADAPTER_CAPS.get(name)
        if caps:
            adapters.append({"name": name, **caps})

    return {"solvers": solvers, "adapters": adapters, "exact_threshold": exact_threshold}
