"""Single entry point used by the form-collection layer to run a solver."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from numsolve.defaults import DEFAULTS, EXPONENTIAL, QUADRATIC
from numsolve.elimination import solve_linear_system
from numsolve.false_position import solve_false_position
from numsolve.fixed_point import solve_fixed_point
from numsolve.input_metadata import advisory_warnings
from numsolve.results import EliminationResult, RootResult, is_success
from numsolve.runtime_logging import append_runtime_event
from numsolve.secant import solve_secant


METHOD_NAMES = list(DEFAULTS.keys())


def _method_id(value: Any) -> int | float:
    """Whole numbers become ints; anything else stays a float the catalog will not match."""
    number = float(value)
    return int(number) if number.is_integer() else number


def resolve_inputs(method: str, inputs: dict[str, Any] | None) -> dict[str, Any]:
    """Merge caller inputs over the method defaults; unknown keys are dropped."""
    if method not in DEFAULTS:
        raise ValueError(f"Unsupported method: {method}")
    merged = deepcopy(DEFAULTS[method])
    for key, value in (inputs or {}).items():
        if key not in merged or value is None:
            continue
        merged[key] = _method_id(value) if key == "method_id" else float(value)
    return merged


def _call_solver(method: str, p: dict[str, Any]) -> EliminationResult | RootResult:
    if method == "elimination":
        return solve_linear_system(p["a1"], p["b1"], p["c1"], p["a2"], p["b2"], p["c2"])
    if method == "false_position":
        return solve_false_position(p["a"], p["b"], p["x0"], p["x1"])
    if method == "fixed_point_quadratic":
        return solve_fixed_point(QUADRATIC, p["method_id"], p["a"], p["b"], p["c"], p["x0"])
    if method == "fixed_point_exponential":
        return solve_fixed_point(EXPONENTIAL, p["method_id"], p["a"], p["b"], x0=p["x0"])
    return solve_secant(p["a"], p["b"], p["x0"], p["x1"])


def run_solver(method: str, inputs: dict[str, Any] | None = None) -> EliminationResult | RootResult:
    """Run the named solver and record a ``solve_completed`` runtime event."""
    params = resolve_inputs(method, inputs)
    result = _call_solver(method, params)
    context = {
        "method": method,
        "inputs": params,
        "outcome": result.outcome,
        "iterations": result.iterations if isinstance(result, RootResult) else 0,
    }
    if isinstance(result, RootResult) and result.failed_at_iteration is not None:
        context["failed_at_iteration"] = result.failed_at_iteration
    if method.startswith("fixed_point_"):
        family = QUADRATIC if method == "fixed_point_quadratic" else EXPONENTIAL
        warnings = advisory_warnings(family, params["method_id"], params["a"], params["b"], params.get("c", 0.0))
        if warnings:
            context["advisories"] = warnings
    append_runtime_event(
        level="INFO" if is_success(result.outcome) else "WARNING",
        event="solve_completed",
        message=result.message.splitlines()[0] if result.message else result.outcome,
        context=context,
    )
    return result
