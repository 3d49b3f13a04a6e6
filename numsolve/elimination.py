"""Two-variable linear system solved by elimination and back-substitution."""

from __future__ import annotations

from numsolve.defaults import VERIFY_TOL, ZERO_EPS
from numsolve.functions import format_linear_equation
from numsolve.results import (
    DEGENERATE_LEADING_COEFFICIENT,
    INFINITE_SOLUTIONS,
    NO_SOLUTION,
    UNIQUE,
    EliminationResult,
)


def solve_linear_system(a1: float, b1: float, c1: float, a2: float, b2: float, c2: float) -> EliminationResult:
    """Solve a1*x + b1*y = c1, a2*x + b2*y = c2 by eliminating x from the second row."""
    coefficients = (float(a1), float(b1), float(c1), float(a2), float(b2), float(c2))
    if abs(a1) < ZERO_EPS:
        return EliminationResult(
            DEGENERATE_LEADING_COEFFICIENT,
            coefficients,
            message="ERROR: a1 cannot be zero\nSwap equations or adjust values",
        )

    multiplier = a2 / a1
    new_b2 = b2 - multiplier * b1
    new_c2 = c2 - multiplier * c1

    if abs(new_b2) < ZERO_EPS:
        if abs(new_c2) < ZERO_EPS:
            outcome = INFINITE_SOLUTIONS
            message = "INFINITE SOLUTIONS\nEquations are dependent (same line)"
        else:
            outcome = NO_SOLUTION
            message = "NO SOLUTION\nEquations are inconsistent (parallel lines)"
        return EliminationResult(
            outcome,
            coefficients,
            multiplier=multiplier,
            new_b2=new_b2,
            new_c2=new_c2,
            message=message,
        )

    y = new_c2 / new_b2
    x = (c1 - b1 * y) / a1
    return EliminationResult(
        UNIQUE,
        coefficients,
        x=x,
        y=y,
        multiplier=multiplier,
        new_b2=new_b2,
        new_c2=new_c2,
        verify1=a1 * x + b1 * y,
        verify2=a2 * x + b2 * y,
        message=f"SUCCESS!\nSolution: x = {x:.6f}, y = {y:.6f}",
    )


def verification_checks(result: EliminationResult) -> tuple[bool, bool]:
    """PASS/FAIL for each equation when the solution is substituted back."""
    if not result.has_solution:
        return False, False
    _, _, c1, _, _, c2 = result.coefficients
    return abs(result.verify1 - c1) < VERIFY_TOL, abs(result.verify2 - c2) < VERIFY_TOL


def elimination_steps(result: EliminationResult) -> list[str]:
    """Worked-example narrative for the step-by-step panel."""
    a1, b1, c1, a2, b2, c2 = result.coefficients
    lines = [
        "Step 1: Write the system",
        f"Eq1:  {format_linear_equation(a1, b1, c1)}",
        f"Eq2:  {format_linear_equation(a2, b2, c2)}",
    ]
    if result.outcome == DEGENERATE_LEADING_COEFFICIENT:
        lines.append("a1 is zero, x cannot be eliminated using Eq1.")
        return lines

    lines += [
        "Step 2: Eliminate x from Eq2",
        f"Find multiplier:  m = a2 / a1 = {a2:.4f} / {a1:.4f}",
        f"m = {result.multiplier:.6f}",
        "Eq2 - m * Eq1",
        f"Result:  0x + ({result.new_b2:.6f})y = {result.new_c2:.6f}",
    ]
    if result.outcome == INFINITE_SOLUTIONS:
        lines.append("0 = 0: every point on the line satisfies both equations.")
        return lines
    if result.outcome == NO_SOLUTION:
        lines.append(f"0 = {result.new_c2:.6f}: the equations contradict each other.")
        return lines

    check1, check2 = verification_checks(result)
    lines += [
        "Step 3: Solve for y",
        f"y = {result.new_c2:.6f} / {result.new_b2:.6f}",
        f"y = {result.y:.6f}",
        "Step 4: Back-substitute into Eq1",
        f"{a1:.2f}x + {b1:.2f}({result.y:.6f}) = {c1:.2f}",
        f"{a1:.2f}x = {c1 - b1 * result.y:.6f}",
        f"x = {result.x:.6f}",
        "Step 5: Verify",
        f"Eq1: {a1:.2f}({result.x:.4f}) + {b1:.2f}({result.y:.4f}) = {result.verify1:.4f}",
        f"Expected: {c1:.2f}    {'PASS' if check1 else 'FAIL'}",
        f"Eq2: {a2:.2f}({result.x:.4f}) + {b2:.2f}({result.y:.4f}) = {result.verify2:.4f}",
        f"Expected: {c2:.2f}    {'PASS' if check2 else 'FAIL'}",
    ]
    return lines
