"""Outcome tags and result records shared by the solvers."""

from __future__ import annotations

from dataclasses import dataclass, field


UNIQUE = "unique"
INFINITE_SOLUTIONS = "infinite_solutions"
NO_SOLUTION = "no_solution"
CONVERGED = "converged"

DEGENERATE_LEADING_COEFFICIENT = "degenerate_leading_coefficient"
NO_BRACKET = "no_bracket"
IDENTICAL_GUESSES = "identical_guesses"
INVALID_METHOD_ID = "invalid_method_id"

DIVISION_BY_ZERO = "division_by_zero"

MAX_ITERATIONS_EXCEEDED = "max_iterations_exceeded"
DIVERGED = "diverged"
NOT_A_CONVERGED_ROOT = "not_a_converged_root"

SUCCESS_OUTCOMES = {UNIQUE, INFINITE_SOLUTIONS, NO_SOLUTION, CONVERGED}
INPUT_ERROR_OUTCOMES = {DEGENERATE_LEADING_COEFFICIENT, NO_BRACKET, IDENTICAL_GUESSES, INVALID_METHOD_ID}
ALL_OUTCOMES = SUCCESS_OUTCOMES | INPUT_ERROR_OUTCOMES | {
    DIVISION_BY_ZERO,
    MAX_ITERATIONS_EXCEEDED,
    DIVERGED,
    NOT_A_CONVERGED_ROOT,
}


@dataclass
class FalsePositionRow:
    n: int
    x0: float
    x1: float
    x2: float
    fx0: float
    fx1: float
    fx2: float
    error: float


@dataclass
class FixedPointRow:
    n: int
    x_current: float
    x_next: float | None
    error: float | None


@dataclass
class SecantRow:
    n: int
    x_prev: float
    x_curr: float
    f_prev: float
    f_curr: float
    x_next: float | None
    error: float | None


TraceRow = FalsePositionRow | FixedPointRow | SecantRow


@dataclass
class RootResult:
    """Outcome of one iterative root-finding call.

    ``root`` is set only when ``outcome`` is ``converged``. ``final_estimate``
    and ``residual`` describe the last accepted iterate either way, so a failed
    run can still report where it stopped.
    """

    method: str
    outcome: str
    root: float | None
    trace: list[TraceRow] = field(default_factory=list)
    message: str = ""
    failed_at_iteration: int | None = None
    final_estimate: float | None = None
    residual: float | None = None

    @property
    def converged(self) -> bool:
        return self.outcome == CONVERGED

    @property
    def iterations(self) -> int:
        return len(self.trace)


@dataclass
class EliminationResult:
    outcome: str
    coefficients: tuple[float, float, float, float, float, float]
    x: float | None = None
    y: float | None = None
    multiplier: float | None = None
    new_b2: float | None = None
    new_c2: float | None = None
    verify1: float | None = None
    verify2: float | None = None
    message: str = ""

    @property
    def has_solution(self) -> bool:
        return self.outcome == UNIQUE


def is_success(outcome: str) -> bool:
    return outcome in SUCCESS_OUTCOMES
