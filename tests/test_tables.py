from __future__ import annotations

import math

import numpy as np

from numsolve.elimination import solve_linear_system
from numsolve.false_position import solve_false_position
from numsolve.fixed_point import solve_fixed_point
from numsolve.functions import exponential_f
from numsolve.secant import solve_secant
from numsolve.tables import (
    curve_frame,
    elimination_lines_frame,
    elimination_summary_frame,
    rounded_trace_frame,
    trace_frame,
)


def test_false_position_trace_frame_uses_display_headers():
    result = solve_false_position(1, 2, 0, 2)
    df = trace_frame(result)
    assert list(df.columns) == ["Iteration", "x0", "x1", "x2", "f(x0)", "f(x1)", "f(x2)", "Error"]
    assert len(df) == result.iterations
    assert df["Iteration"].tolist() == list(range(1, result.iterations + 1))


def test_undefined_next_estimate_becomes_nan():
    result = solve_fixed_point("exponential", 1, 1, -5, x0=0)
    df = trace_frame(result)
    assert list(df.columns) == ["n", "x_n", "x_(n+1)", "Error"]
    assert math.isnan(df.loc[0, "x_(n+1)"])
    assert math.isnan(df.loc[0, "Error"])


def test_secant_rounding_and_empty_trace():
    df = rounded_trace_frame(solve_secant(1, 2, 1, 2))
    assert "x_(n+1)" in df.columns
    assert df.loc[0, "x_n"] == 2.0
    assert trace_frame(solve_secant(1, 2, 1, 1)).empty


def test_curve_frame_masks_values_outside_limit():
    df = curve_frame(lambda x: exponential_f(x, 0, 0), 0, 10, points=11, y_limit=100)
    assert len(df) == 11
    assert df.loc[0, "y"] == 1.0
    assert np.isnan(df.loc[10, "y"])
    assert df["y"].notna().sum() == 5


def test_elimination_lines_and_summary():
    result = solve_linear_system(1, 1, 3, 2, 0, 4)
    lines = elimination_lines_frame(result, -5, 5, points=11)
    assert list(lines.columns) == ["x", "Eq1", "Eq2"]
    assert lines["Eq2"].isna().all()
    assert abs(lines.loc[5, "Eq1"] - 3.0) < 1e-12

    summary = elimination_summary_frame(result)
    assert summary["Check"].tolist() == ["PASS", "PASS"]
    assert elimination_summary_frame(solve_linear_system(1, 2, 3, 2, 4, 7)).empty
