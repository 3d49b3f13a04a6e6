"""Regula falsi for f(x) = e^x - a*x - b."""

from __future__ import annotations

from numsolve.defaults import MAX_ITER_FALSE_POSITION, TOLERANCE_FALSE_POSITION
from numsolve.functions import exponential_f
from numsolve.results import (
    CONVERGED,
    MAX_ITERATIONS_EXCEEDED,
    NO_BRACKET,
    FalsePositionRow,
    RootResult,
)


METHOD = "false_position"


def solve_false_position(
    a: float,
    b: float,
    x0: float,
    x1: float,
    tol: float = TOLERANCE_FALSE_POSITION,
    max_iter: int = MAX_ITER_FALSE_POSITION,
) -> RootResult:
    """Find a root of e^x - a*x - b inside [x0, x1] by false position.

    The interval must bracket a sign change. Each step replaces the endpoint
    whose function value shares the sign of f(x2), so the bracket always keeps
    a sign change. Stops once |f(x2)| < tol.
    """
    fx0 = exponential_f(x0, a, b)
    fx1 = exponential_f(x1, a, b)
    if fx0 * fx1 >= 0:
        return RootResult(
            METHOD,
            NO_BRACKET,
            None,
            [],
            f"ERROR: f(x0) and f(x1) must have opposite signs!\nf({x0:.2f})={fx0:.4f}, f({x1:.2f})={fx1:.4f}",
        )

    trace: list[FalsePositionRow] = []
    x2 = x1
    fx2 = fx1
    for i in range(1, max_iter + 1):
        x2 = x1 - fx1 * (x1 - x0) / (fx1 - fx0)
        fx2 = exponential_f(x2, a, b)
        error = abs(fx2)
        trace.append(FalsePositionRow(i, x0, x1, x2, fx0, fx1, fx2, error))

        if error < tol:
            return RootResult(
                METHOD,
                CONVERGED,
                x2,
                trace,
                f"SUCCESS!\nRoot: x = {x2:.6f}\nIterations: {i}",
                final_estimate=x2,
                residual=fx2,
            )

        if fx0 * fx2 < 0:
            x1 = x2
            fx1 = fx2
        else:
            x0 = x2
            fx0 = fx2

    return RootResult(
        METHOD,
        MAX_ITERATIONS_EXCEEDED,
        None,
        trace,
        "FAILED: Did not converge\nTry different initial guesses",
        final_estimate=x2,
        residual=fx2,
    )
