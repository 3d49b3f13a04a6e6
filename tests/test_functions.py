from __future__ import annotations

import math

from numsolve.functions import (
    exponential_f,
    format_exponential_equation,
    format_quadratic_equation,
    quadratic_f,
    safe_exp,
)


def test_safe_exp_saturates_instead_of_raising():
    assert safe_exp(0) == 1.0
    assert safe_exp(1000) == math.inf
    assert exponential_f(1000, 1, 2) == math.inf


def test_target_functions():
    assert quadratic_f(2, 1, -3, 2) == 0
    assert abs(exponential_f(0, 1, 2) + 1.0) < 1e-12


def test_exponential_equation_text():
    assert format_exponential_equation(2, 1) == "Equation: eˣ - 2x - 1 = 0"
    assert format_exponential_equation(-1, -3) == "Equation: eˣ + x + 3 = 0"
    assert format_exponential_equation(0, 0) == "Equation: eˣ = 0"
    assert format_exponential_equation(1.5, 0) == "Equation: eˣ - 1.5x = 0"


def test_quadratic_equation_text():
    assert format_quadratic_equation(1, -3, 2) == "Equation: x² - 3x + 2 = 0"
    assert format_quadratic_equation(-2, 0, -1) == "Equation: -2x² - 1 = 0"
    assert format_quadratic_equation(0, 0, 0) == "Equation: 0 = 0"
