"""Solver constants and default form inputs."""

from __future__ import annotations


ZERO_EPS = 1e-10

MAX_ITER_FALSE_POSITION = 50
MAX_ITER_FIXED_POINT = 50
MAX_ITER_SECANT = 100

TOLERANCE_FALSE_POSITION = 1e-4
TOLERANCE_FIXED_POINT = 0.01
TOLERANCE_SECANT = 1e-4

# |x_next| beyond this is treated as divergence.
DIVERGENCE_LIMIT = 1e10
# |f(x)| above this rejects a fixed-point result.
RESIDUAL_LIMIT = 0.1
# Elimination verification: |a*x + b*y - c| must be under this.
VERIFY_TOL = 0.01
# Step factor for the relaxed exponential rearrangement x - λ f(x).
RELAXATION = 0.1

QUADRATIC = "quadratic"
EXPONENTIAL = "exponential"
EQUATION_FAMILIES = (QUADRATIC, EXPONENTIAL)

DEFAULT_METHOD_ID = 1


DEFAULTS: dict[str, dict[str, float | int]] = {
    "elimination": {"a1": 0.0, "b1": 0.0, "c1": 0.0, "a2": 0.0, "b2": 0.0, "c2": 0.0},
    "false_position": {"a": 0.0, "b": 0.0, "x0": 0.0, "x1": 0.0},
    "fixed_point_quadratic": {"a": 0.0, "b": 0.0, "c": 0.0, "x0": 0.0, "method_id": DEFAULT_METHOD_ID},
    "fixed_point_exponential": {"a": 0.0, "b": 0.0, "x0": 0.0, "method_id": DEFAULT_METHOD_ID},
    "secant": {"a": 0.0, "b": 0.0, "x0": 0.0, "x1": 0.0},
}
