"""Secant method for f(x) = e^x - a*x - b."""

from __future__ import annotations

from numsolve.defaults import MAX_ITER_SECANT, TOLERANCE_SECANT, ZERO_EPS
from numsolve.functions import exponential_f
from numsolve.results import (
    CONVERGED,
    DIVISION_BY_ZERO,
    IDENTICAL_GUESSES,
    MAX_ITERATIONS_EXCEEDED,
    RootResult,
    SecantRow,
)


METHOD = "secant"


def solve_secant(
    a: float,
    b: float,
    x0: float,
    x1: float,
    tol: float = TOLERANCE_SECANT,
    max_iter: int = MAX_ITER_SECANT,
) -> RootResult:
    """Two-point secant iteration.

    Converges when either the step or |f(x_next)| drops below ``tol``. A flat
    secant (|f_curr - f_prev| < 1e-10) stops the run with ``division_by_zero``;
    that iteration's row is kept with no next estimate.
    """
    if abs(x1 - x0) < ZERO_EPS:
        return RootResult(
            METHOD,
            IDENTICAL_GUESSES,
            None,
            [],
            "ERROR: x0 and x1 must be different!\nPlease choose two distinct initial guesses.",
        )

    x_prev = x0
    x_curr = x1
    f_prev = exponential_f(x_prev, a, b)
    f_curr = exponential_f(x_curr, a, b)
    trace: list[SecantRow] = []

    for n in range(1, max_iter + 1):
        denominator = f_curr - f_prev
        if abs(denominator) < ZERO_EPS:
            trace.append(SecantRow(n, x_prev, x_curr, f_prev, f_curr, None, None))
            return RootResult(
                METHOD,
                DIVISION_BY_ZERO,
                None,
                trace,
                f"ERROR: Division by zero at iteration {n}\nf(x{n - 1}) = f(x{n}), cannot continue.",
                failed_at_iteration=n,
                final_estimate=x_curr,
                residual=f_curr,
            )

        x_next = x_curr - f_curr * (x_curr - x_prev) / denominator
        error = abs(x_next - x_curr)
        trace.append(SecantRow(n, x_prev, x_curr, f_prev, f_curr, x_next, error))

        f_next = exponential_f(x_next, a, b)
        if error < tol or abs(f_next) < tol:
            return RootResult(
                METHOD,
                CONVERGED,
                x_next,
                trace,
                f"SUCCESS! Converged in {n} iterations.\nApproximate root: x = {x_next:.3f}",
                final_estimate=x_next,
                residual=f_next,
            )

        x_prev = x_curr
        x_curr = x_next
        f_prev = f_curr
        f_curr = f_next

    return RootResult(
        METHOD,
        MAX_ITERATIONS_EXCEEDED,
        None,
        trace,
        f"Did not converge in {max_iter} iterations.\nTry different initial guesses.",
        final_estimate=x_curr,
        residual=f_curr,
    )
