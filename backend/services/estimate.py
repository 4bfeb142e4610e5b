# services/estimate.py
"""
Wall-clock estimate for an exhaustive search, used to decide whether a forced
exact solve needs explicit confirmation.
"""
from __future__ import annotations
import math

SECONDS_PER_PERMUTATION = 0.0005  # 0.5 ms per permutation baseline
PERMUTATION_CAP = 1e9  # beyond this, treat duration as unbounded


def _factorial_with_cap(n: int, cap: float = PERMUTATION_CAP) -> float:
    result = 1
    for i in range(2, n + 1):
        result *= i
        if result > cap:
            return math.inf
    return float(result)


def estimate_exact_seconds(
    point_count: int,
    seconds_per_permutation: float = SECONDS_PER_PERMUTATION,
    cap: float = PERMUTATION_CAP,
) -> float:
    """(n-1)! * seconds_per_permutation, or inf once the count passes `cap`."""
    if point_count <= 2:
        return 0.05
    permutations = _factorial_with_cap(max(point_count - 1, 1), cap)
    if math.isinf(permutations):
        return math.inf
    return permutations * seconds_per_permutation


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _plural(value: int, unit: str) -> str:
    return f"~{value} {unit}" if value == 1 else f"~{value} {unit}s"


def format_duration_estimate(seconds: float) -> str:
    if math.isinf(seconds):
        return "> several days"
    if seconds < 1:
        return "< 1 second"
    if seconds < 60:
        return _plural(max(1, _round_half_up(seconds)), "second")
    minutes = seconds / 60
    if minutes < 60:
        return _plural(max(1, _round_half_up(minutes)), "minute")
    hours = minutes / 60
    if hours < 24:
        return _plural(max(1, _round_half_up(hours)), "hour")
    return _plural(max(1, _round_half_up(hours / 24)), "day")


def describe_exact_estimate(point_count: int) -> str:
    return format_duration_estimate(estimate_exact_seconds(point_count))
