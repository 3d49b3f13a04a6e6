"""Fixed-point method catalog and advisory input checks."""

from __future__ import annotations

from typing import Any

from numsolve.defaults import EXPONENTIAL, QUADRATIC


METHOD_LABELS: dict[str, dict[int, dict[str, Any]]] = {
    QUADRATIC: {
        1: {"formula": "x = -(ax² + c)/b", "requires": "b", "note": "Requires b != 0."},
        2: {"formula": "x = -c/(ax + b)", "requires": None, "note": "Requires ax + b != 0 at every iterate."},
        3: {"formula": "x = √((-bx - c)/a)", "requires": "a", "note": "Positive root branch, a != 0."},
        4: {"formula": "x = -√((-bx - c)/a)", "requires": "a", "note": "Negative root branch, a != 0."},
        5: {"formula": "x = (x² - c/a)/(-b/a)", "requires": "b", "note": "Requires b != 0."},
    },
    EXPONENTIAL: {
        1: {"formula": "x = ln(ax + b)", "requires": None, "note": "Requires ax + b > 0 at every iterate."},
        2: {"formula": "x = (eˣ - b)/a", "requires": "a", "note": "Requires a != 0."},
        3: {"formula": "x = ln((eˣ - b)/a)", "requires": "a", "note": "Requires a != 0 and eˣ > b."},
        4: {"formula": "x = eˣ/a - b/a", "requires": "a", "note": "Requires a != 0."},
        5: {"formula": "x = x - 0.1(eˣ - ax - b)", "requires": None, "note": "Relaxed step, always defined."},
    },
}


def method_label(family: str, method_id: int) -> str:
    entry = METHOD_LABELS.get(family, {}).get(method_id)
    if not entry:
        return f"Method {method_id}"
    return f"{method_id}. {entry['formula']}"


def method_options(family: str) -> list[str]:
    return [method_label(family, method_id) for method_id in sorted(METHOD_LABELS.get(family, {}))]


def advisory_warnings(family: str, method_id: int, a: float, b: float, c: float = 0.0) -> list[str]:
    """Warnings for inputs that make the chosen rearrangement undefined everywhere.

    These never block a solve; the solver reports the same situation as a
    divergence on its first step.
    """
    warnings: list[str] = []
    entry = METHOD_LABELS.get(family, {}).get(method_id)
    if entry is None:
        warnings.append("Invalid method! Please choose 1-5.")
        return warnings
    required = entry["requires"]
    values = {"a": a, "b": b, "c": c}
    if required and values[required] == 0:
        warnings.append(f"Error: Method {method_id} requires {required} != 0!")
    if family == QUADRATIC and method_id == 5 and a == 0:
        warnings.append(f"Error: Method {method_id} requires a != 0!")
    return warnings
