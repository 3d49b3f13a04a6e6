"""Tabular and plot-ready views of solver results."""

from __future__ import annotations

from dataclasses import asdict
from typing import Callable

import numpy as np
import pandas as pd

from numsolve.elimination import verification_checks
from numsolve.results import EliminationResult, FalsePositionRow, FixedPointRow, RootResult, SecantRow


TRACE_COLUMNS = {
    FalsePositionRow: {
        "n": "Iteration",
        "x0": "x0",
        "x1": "x1",
        "x2": "x2",
        "fx0": "f(x0)",
        "fx1": "f(x1)",
        "fx2": "f(x2)",
        "error": "Error",
    },
    FixedPointRow: {
        "n": "n",
        "x_current": "x_n",
        "x_next": "x_(n+1)",
        "error": "Error",
    },
    SecantRow: {
        "n": "n",
        "x_prev": "x_(n-1)",
        "x_curr": "x_n",
        "f_prev": "f(x_(n-1))",
        "f_curr": "f(x_n)",
        "x_next": "x_(n+1)",
        "error": "Error",
    },
}

# Decimal places used by the iteration table for each method.
TABLE_DECIMALS = {
    "false_position": 3,
    "fixed_point_quadratic": 4,
    "fixed_point_exponential": 4,
    "secant": 6,
}


def trace_frame(result: RootResult) -> pd.DataFrame:
    """Return the iteration trace as a dataframe with display column names."""
    if not result.trace:
        return pd.DataFrame()
    row_type = type(result.trace[0])
    columns = TRACE_COLUMNS[row_type]
    df = pd.DataFrame([asdict(row) for row in result.trace])
    df = df.astype({name: float for name in columns if name != "n"})
    return df.rename(columns=columns)


def rounded_trace_frame(result: RootResult) -> pd.DataFrame:
    df = trace_frame(result)
    if df.empty:
        return df
    return df.round(TABLE_DECIMALS.get(result.method, 6))


def curve_frame(
    func: Callable[[float], float],
    x_min: float,
    x_max: float,
    points: int = 400,
    y_limit: float | None = None,
) -> pd.DataFrame:
    """Sample func on an even grid; values beyond ``y_limit`` become NaN gaps."""
    xs = np.linspace(float(x_min), float(x_max), int(points))
    ys = np.array([func(float(x)) for x in xs], dtype=float)
    ys[~np.isfinite(ys)] = np.nan
    if y_limit is not None:
        ys[np.abs(ys) > float(y_limit)] = np.nan
    return pd.DataFrame({"x": xs, "y": ys})


def elimination_lines_frame(result: EliminationResult, x_min: float, x_max: float, points: int = 200) -> pd.DataFrame:
    """Both equations as y(x) series; a vertical line (b == 0) yields all-NaN y."""
    a1, b1, c1, a2, b2, c2 = result.coefficients
    xs = np.linspace(float(x_min), float(x_max), int(points))
    out = {"x": xs}
    for label, (a, b, c) in (("Eq1", (a1, b1, c1)), ("Eq2", (a2, b2, c2))):
        if b == 0:
            out[label] = np.full_like(xs, np.nan)
        else:
            out[label] = (c - a * xs) / b
    return pd.DataFrame(out)


def elimination_summary_frame(result: EliminationResult) -> pd.DataFrame:
    """Verification table: substituted value vs expected right-hand side."""
    if not result.has_solution:
        return pd.DataFrame(columns=["Equation", "Computed", "Expected", "Check"])
    _, _, c1, _, _, c2 = result.coefficients
    check1, check2 = verification_checks(result)
    return pd.DataFrame(
        [
            {"Equation": "Eq1", "Computed": result.verify1, "Expected": c1, "Check": "PASS" if check1 else "FAIL"},
            {"Equation": "Eq2", "Computed": result.verify2, "Expected": c2, "Check": "PASS" if check2 else "FAIL"},
        ]
    )
