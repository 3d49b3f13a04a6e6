"""Fixed-point iteration x <- g(x) over five rearrangements per equation family.

Each rearrangement returns ``None`` where it is undefined (log of a
non-positive number, square root of a negative number, division by zero).
The driver treats ``None``, infinities and runaway magnitudes as divergence.
A run that meets the step tolerance is accepted as a root only when the
target f is also within the residual limit at the final iterate.
"""

from __future__ import annotations

import math
from typing import Callable

from numsolve.defaults import (
    DIVERGENCE_LIMIT,
    EXPONENTIAL,
    MAX_ITER_FIXED_POINT,
    QUADRATIC,
    RELAXATION,
    RESIDUAL_LIMIT,
    TOLERANCE_FIXED_POINT,
    ZERO_EPS,
)
from numsolve.functions import exponential_f, quadratic_f, safe_exp
from numsolve.results import (
    CONVERGED,
    DIVERGED,
    INVALID_METHOD_ID,
    NOT_A_CONVERGED_ROOT,
    FixedPointRow,
    RootResult,
)


Rearrangement = Callable[[float, float, float, float], float | None]


def _q1(x: float, a: float, b: float, c: float) -> float | None:
    if b == 0:
        return None
    return -(a * x * x + c) / b


def _q2(x: float, a: float, b: float, c: float) -> float | None:
    if abs(a * x + b) < ZERO_EPS:
        return None
    return -c / (a * x + b)


def _q3(x: float, a: float, b: float, c: float) -> float | None:
    if a == 0 or (-b * x - c) / a < 0:
        return None
    return math.sqrt((-b * x - c) / a)


def _q4(x: float, a: float, b: float, c: float) -> float | None:
    if a == 0 or (-b * x - c) / a < 0:
        return None
    return -math.sqrt((-b * x - c) / a)


def _q5(x: float, a: float, b: float, c: float) -> float | None:
    if b == 0 or a == 0:
        return None
    return (x * x - c / a) / (-b / a)


def _e1(x: float, a: float, b: float, c: float) -> float | None:
    if a * x + b <= 0:
        return None
    return math.log(a * x + b)


def _e2(x: float, a: float, b: float, c: float) -> float | None:
    if a == 0:
        return None
    return (safe_exp(x) - b) / a


def _e3(x: float, a: float, b: float, c: float) -> float | None:
    if a == 0 or safe_exp(x) - b <= 0:
        return None
    arg = (safe_exp(x) - b) / a
    if arg <= 0:
        return None
    return math.log(arg)


def _e4(x: float, a: float, b: float, c: float) -> float | None:
    if a == 0:
        return None
    return safe_exp(x) / a - b / a


def _e5(x: float, a: float, b: float, c: float) -> float | None:
    return x - RELAXATION * (safe_exp(x) - a * x - b)


REARRANGEMENTS: dict[str, dict[int, Rearrangement]] = {
    QUADRATIC: {1: _q1, 2: _q2, 3: _q3, 4: _q4, 5: _q5},
    EXPONENTIAL: {1: _e1, 2: _e2, 3: _e3, 4: _e4, 5: _e5},
}


def target_function(family: str, a: float, b: float, c: float = 0.0) -> Callable[[float], float]:
    if family == QUADRATIC:
        return lambda x: quadratic_f(x, a, b, c)
    if family == EXPONENTIAL:
        return lambda x: exponential_f(x, a, b)
    raise ValueError(f"Unsupported equation family: {family}")


def _is_runaway(value: float | None) -> bool:
    return value is None or math.isnan(value) or math.isinf(value) or abs(value) > DIVERGENCE_LIMIT


def solve_fixed_point(
    family: str,
    method_id: int,
    a: float,
    b: float,
    c: float = 0.0,
    x0: float = 0.0,
    tol: float = TOLERANCE_FIXED_POINT,
    max_iter: int = MAX_ITER_FIXED_POINT,
) -> RootResult:
    """Iterate x <- g(x) for the selected rearrangement of the family's f(x) = 0."""
    f = target_function(family, a, b, c)
    method = f"fixed_point_{family}"
    g = REARRANGEMENTS[family].get(method_id)
    if g is None:
        return RootResult(method, INVALID_METHOD_ID, None, [], "Error: Method must be 1-5")

    trace: list[FixedPointRow] = []
    x_current = float(x0)
    diverged = False
    for i in range(1, max_iter + 1):
        x_next = g(x_current, a, b, c)
        error = None if x_next is None else abs(x_next - x_current)
        trace.append(FixedPointRow(i, x_current, x_next, error))

        if _is_runaway(x_next):
            diverged = True
            break

        x_current = x_next
        if error < tol:
            break

    residual = f(x_current)
    if diverged:
        outcome = DIVERGED
        message = "FAILED: Diverged\nTry different method or x0"
    elif abs(residual) > RESIDUAL_LIMIT:
        outcome = NOT_A_CONVERGED_ROOT
        message = "FAILED: Did not converge\nTry different method or x0"
    else:
        return RootResult(
            method,
            CONVERGED,
            x_current,
            trace,
            f"SUCCESS!\nRoot: x = {x_current:.4f}\nIterations: {len(trace)}",
            final_estimate=x_current,
            residual=residual,
        )
    return RootResult(method, outcome, None, trace, message, final_estimate=x_current, residual=residual)
