# backend/tests/test_adaptive.py
from services.solvers.adaptive import AdaptiveSolver, solve_adaptive
from services.solvers.common import LOOP_WARNING
from services.solvers.heuristic_solver import MULTI_START_WARNING


def test_small_instance_goes_exact(square):
    outcome = solve_adaptive(square())
    assert outcome.strategy == "exact"
    assert outcome.notes == ["Exact strategy selected for 4 locations."]
    assert outcome.total_distance == 3


def test_threshold_is_inclusive(square):
    outcome = solve_adaptive(square(), exact_threshold=4)
    assert outcome.strategy == "exact"


def test_above_threshold_goes_heuristic(square):
    outcome = solve_adaptive(square(), exact_threshold=3)
    assert outcome.strategy == "heuristic"
    assert outcome.notes == ["Heuristic strategy selected for 4 locations."]
    # solver warnings pass through unchanged
    assert outcome.warnings == [MULTI_START_WARNING]


def test_loop_warning_passes_through(square):
    outcome = solve_adaptive(square(start_id="d", end_id="d"))
    assert outcome.warnings == [LOOP_WARNING]
    assert outcome.ordered_ids[0] == outcome.ordered_ids[-1] == "d"


def test_solver_class(square):
    outcome = AdaptiveSolver(exact_threshold=2).solve(square(start_id="a", end_id="d"))
    assert outcome.strategy == "heuristic"
    assert outcome.ordered_ids == ["a", "b", "c", "d"]
