"""Target functions for both equation families and their display strings."""

from __future__ import annotations

import math


def safe_exp(x: float) -> float:
    """e**x that saturates to +inf instead of raising OverflowError."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def exponential_f(x: float, a: float, b: float) -> float:
    return safe_exp(x) - a * x - b


def quadratic_f(x: float, a: float, b: float, c: float) -> float:
    return a * x * x + b * x + c


def _fmt(v: float) -> str:
    if abs(v - round(v)) < 1e-9:
        return f"{int(round(v))}"
    return f"{v:.3f}".rstrip("0").rstrip(".")


def _signed_term(coef: float, symbol: str, leading: bool = False) -> str:
    if coef == 0:
        return ""
    magnitude = abs(coef)
    body = symbol if (magnitude == 1 and symbol) else f"{_fmt(magnitude)}{symbol}"
    if leading:
        return body if coef > 0 else f"-{body}"
    return f" + {body}" if coef > 0 else f" - {body}"


def format_exponential_equation(a: float, b: float) -> str:
    """Render e^x - a*x - b = 0, folding the subtraction into each term's sign."""
    return f"Equation: eˣ{_signed_term(-a, 'x')}{_signed_term(-b, '')} = 0"


def format_quadratic_equation(a: float, b: float, c: float) -> str:
    terms = [(a, "x²"), (b, "x"), (c, "")]
    text = ""
    for coef, symbol in terms:
        text += _signed_term(coef, symbol, leading=not text)
    return f"Equation: {text or '0'} = 0"


def format_linear_equation(a: float, b: float, c: float) -> str:
    return f"{a:.2f}x + {b:.2f}y = {c:.2f}"
