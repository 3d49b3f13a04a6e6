from __future__ import annotations

from numsolve.input_metadata import advisory_warnings, method_label, method_options


def test_method_options_cover_five_rearrangements():
    assert len(method_options("quadratic")) == 5
    assert method_label("exponential", 1) == "1. x = ln(ax + b)"
    assert method_label("exponential", 9) == "Method 9"


def test_advisory_warnings_flag_zero_divisors():
    assert advisory_warnings("quadratic", 1, 1, 0, 2) == ["Error: Method 1 requires b != 0!"]
    assert advisory_warnings("quadratic", 3, 0, 1, 2) == ["Error: Method 3 requires a != 0!"]
    assert advisory_warnings("quadratic", 5, 0, 1, 2) == ["Error: Method 5 requires a != 0!"]
    assert advisory_warnings("exponential", 4, 0, 1) == ["Error: Method 4 requires a != 0!"]
    assert advisory_warnings("exponential", 5, 0, 0) == []


def test_advisory_warnings_for_unknown_method():
    assert advisory_warnings("quadratic", 7, 1, 1, 1) == ["Invalid method! Please choose 1-5."]
