"""Number Format — tests for display text <-> number conversion.

Tests cover:
    - parse_number leading-prefix parsing and NaN fallback
    - round_to_precision half-away-from-zero on the exact binary value
    - format_number plain/scientific notation, negative zero, non-finite values
"""

import math

import pytest

from calculator.core.number_format import (
    parse_number, round_to_precision, format_number, format_result,
)


# ─── parse_number ────────────────────────────────────────────────

@pytest.mark.parametrize("text, expected", [
    ("0", 0.0),
    ("42", 42.0),
    ("3.", 3.0),
    (".5", 0.5),
    ("-7.25", -7.25),
    ("1e-7", 1e-7),
    ("1.5e+21", 1.5e21),
    ("12abc", 12.0),
    ("1e", 1.0),
    ("Infinity", math.inf),
    ("-Infinity", -math.inf),
])
def test_parse_number(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["Error", "NaN", "", ".", "-", "abc"])
def test_parse_number_without_numeric_prefix_is_nan(text):
    assert math.isnan(parse_number(text))


# ─── round_to_precision ──────────────────────────────────────────

def test_round_to_two_places():
    assert round_to_precision(1 / 3, 2) == 0.33


def test_round_to_zero_places():
    assert round_to_precision(2 / 3, 0) == 1.0


def test_round_half_away_from_zero():
    assert round_to_precision(2.5, 0) == 3.0
    assert round_to_precision(-2.5, 0) == -3.0
    assert round_to_precision(0.125, 2) == 0.13


def test_round_uses_exact_binary_value():
    # 1.005 is stored as 1.00499999999999989...
    assert round_to_precision(1.005, 2) == 1.0


def test_round_leaves_huge_and_non_finite_values():
    assert round_to_precision(1e21 + 0.5, 2) == 1e21 + 0.5
    assert round_to_precision(math.inf, 2) == math.inf
    assert math.isnan(round_to_precision(math.nan, 2))


# ─── format_number ───────────────────────────────────────────────

@pytest.mark.parametrize("value, text", [
    (0.0, "0"),
    (-0.0, "0"),
    (5.0, "5"),
    (50.0, "50"),
    (14.0, "14"),
    (-3.0, "-3"),
    (0.33, "0.33"),
    (0.05, "0.05"),
    (123.456, "123.456"),
    (0.1 + 0.2, "0.30000000000000004"),
    (1e16, "10000000000000000"),
    (1e20, "100000000000000000000"),
    (1e21, "1e+21"),
    (1.5e21, "1.5e+21"),
    (0.000001, "0.000001"),
    (1e-7, "1e-7"),
    (-2.5e-8, "-2.5e-8"),
])
def test_format_number(value, text):
    assert format_number(value) == text


def test_format_non_finite():
    assert format_number(math.nan) == "NaN"
    assert format_number(math.inf) == "Infinity"
    assert format_number(-math.inf) == "-Infinity"


def test_format_result_drops_trailing_zeros():
    assert format_result(2.5 * 2, 4) == "5"
    assert format_result(1.10, 2) == "1.1"


def test_format_result_small_negative_rounds_to_plain_zero():
    assert format_result(-0.001, 2) == "0"
