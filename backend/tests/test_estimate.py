# backend/tests/test_estimate.py
import math

import pytest

from services.estimate import (
    describe_exact_estimate,
    estimate_exact_seconds,
    format_duration_estimate,
)


@pytest.mark.parametrize("n", [0, 1, 2])
def test_tiny_instances_have_floor_estimate(n):
    assert estimate_exact_seconds(n) == 0.05


def test_factorial_model():
    assert estimate_exact_seconds(3) == pytest.approx(2 * 0.0005)
    assert estimate_exact_seconds(9) == pytest.approx(40320 * 0.0005)


def test_unbounded_past_cap():
    assert math.isinf(estimate_exact_seconds(14))  # 13! > 1e9
    assert not math.isinf(estimate_exact_seconds(13))


def test_custom_rate_and_cap():
    assert estimate_exact_seconds(5, seconds_per_permutation=1.0) == 24.0
    assert math.isinf(estimate_exact_seconds(5, cap=10))


@pytest.mark.parametrize(
    "seconds,label",
    [
        (0.2, "< 1 second"),
        (1, "~1 second"),
        (20.16, "~20 seconds"),
        (60, "~1 minute"),
        (181.44, "~3 minutes"),
        (3600, "~1 hour"),
        (7 * 3600, "~7 hours"),
        (86400, "~1 day"),
        (239500.8, "~3 days"),
        (math.inf, "> several days"),
    ],
)
def test_format_duration_estimate(seconds, label):
    assert format_duration_estimate(seconds) == label


def test_describe_exact_estimate():
    assert describe_exact_estimate(4) == "< 1 second"
    assert describe_exact_estimate(10) == "~3 minutes"
    assert describe_exact_estimate(20) == "> several days"


@pytest.mark.parametrize(
    "seconds,label",
    [(2.5, "~3 seconds"), (90, "~2 minutes"), (2.5 * 3600, "~3 hours"), (1.5 * 86400, "~2 days")],
)
def test_half_values_round_up(seconds, label):
    assert format_duration_estimate(seconds) == label
