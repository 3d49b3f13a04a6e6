from __future__ import annotations

import pytest

from numsolve.fixed_point import solve_fixed_point
from numsolve.results import (
    ALL_OUTCOMES,
    CONVERGED,
    DIVERGED,
    INVALID_METHOD_ID,
    NOT_A_CONVERGED_ROOT,
)


def test_quadratic_rearrangement_converges_to_root():
    # x^2 - 3x + 2 = 0 via x = -c/(ax + b) = -2/(x - 3), attracted to x = 1.
    result = solve_fixed_point("quadratic", 2, 1, -3, 2, x0=0)
    assert result.outcome == CONVERGED
    assert len(result.trace) == 6
    assert abs(result.root - 1.0) < 0.01
    assert result.trace[-1].error < 0.01
    assert abs(result.residual) <= 0.1


def test_small_step_far_from_root_is_rejected():
    # x^2 + 100x + 2500.5 has no real root; the first step is only 0.005.
    result = solve_fixed_point("quadratic", 1, 1, 100, 2500.5, x0=-50)
    assert len(result.trace) == 1
    assert result.trace[0].error < 0.01
    assert result.outcome == NOT_A_CONVERGED_ROOT
    assert result.root is None
    assert abs(result.residual) > 0.1
    assert abs(result.final_estimate + 50.005) < 1e-9


def test_runaway_iterates_stop_at_divergence():
    # g(x) = -x^2 from 10: -100, -1e4, -1e8, -1e16.
    result = solve_fixed_point("quadratic", 1, 1, 1, 0, x0=10)
    assert result.outcome == DIVERGED
    assert len(result.trace) == 4
    assert result.trace[-1].x_next == -1e16
    assert result.final_estimate == -1e8
    assert result.root is None


def test_undefined_logarithm_is_divergence():
    result = solve_fixed_point("exponential", 1, 1, -5, x0=0)
    assert result.outcome == DIVERGED
    assert len(result.trace) == 1
    assert result.trace[0].x_next is None
    assert result.trace[0].error is None


def test_exponential_overflow_is_divergence():
    result = solve_fixed_point("exponential", 2, 1, 0, x0=2)
    assert result.outcome == DIVERGED
    assert len(result.trace) == 3


def test_relaxed_exponential_rearrangement_converges():
    result = solve_fixed_point("exponential", 5, 1, 2, x0=1)
    assert result.outcome == CONVERGED
    assert 1.0 < result.root < 1.1462
    assert abs(result.residual) <= 0.1


@pytest.mark.parametrize("method_id", [0, 6, -1])
def test_invalid_method_id_runs_no_iterations(method_id):
    result = solve_fixed_point("quadratic", method_id, 1, -3, 2, x0=0)
    assert result.outcome == INVALID_METHOD_ID
    assert result.trace == []


def test_unknown_family_is_a_programming_error():
    with pytest.raises(ValueError):
        solve_fixed_point("cubic", 1, 1, 1, 1, x0=0)


def test_every_variant_handles_degenerate_coefficients():
    cases = [
        ("quadratic", (0.0, 0.0, 0.0)),
        ("quadratic", (1.0, 0.0, -4.0)),
        ("quadratic", (-1.0, 2.0, 3.0)),
        ("exponential", (0.0, 0.0, 0.0)),
        ("exponential", (-2.0, 1.0, 0.0)),
    ]
    for family, (a, b, c) in cases:
        for method_id in range(1, 6):
            for x0 in (0.0, 3.0, 800.0):
                result = solve_fixed_point(family, method_id, a, b, c, x0=x0)
                assert result.outcome in ALL_OUTCOMES
                assert len(result.trace) <= 50
