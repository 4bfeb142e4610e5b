# services/solver_factory.py
from typing import Dict, Callable, List
from core.interfaces import RouteSolver

_solver_registry: Dict[str, Callable[[], RouteSolver]] = {}
_registered = False


def register_solver(name: str, ctor: Callable[[], RouteSolver]) -> None:
    key = name.lower().strip()
    if key in _solver_registry:
        raise ValueError(f"Solver '{name}' is already registered.")
    _solver_registry[key] = ctor


def get_solver(name: str) -> RouteSolver:
    key = name.lower().strip()
    # Lazy init in case app lifespan didn't run
    if key not in _solver_registry:
        register_solvers()
    if key not in _solver_registry:
        raise ValueError(f"Solver '{name}' is not registered.")
    return _solver_registry[key]()


def list_solvers() -> List[str]:
    if not _solver_registry:
        register_solvers()
    return sorted(_solver_registry.keys())


def register_solvers() -> None:
    """Call once at startup/tests to register built-ins."""
    global _registered
    if _registered:
        return
    from config import get_settings
    from services.solvers.adaptive import AdaptiveSolver
    from services.solvers.exact_solver import ExactSolver
    from services.solvers.heuristic_solver import HeuristicSolver

    s = get_settings()
    register_solver("exact", ExactSolver)
    register_solver(
        "heuristic",
        lambda: HeuristicSolver(
            max_passes=s.TWO_OPT_MAX_PASSES, max_starts=s.MAX_START_CANDIDATES
        ),
    )
    register_solver(
        "auto",
        lambda: AdaptiveSolver(
            exact_threshold=s.EXACT_THRESHOLD,
            max_passes=s.TWO_OPT_MAX_PASSES,
            max_starts=s.MAX_START_CANDIDATES,
        ),
    )

    _registered = True
