"""Tests for operand parsing, rounding and display formatting."""

from decimal import Decimal

from web_calculator.numeric import (
    float_to_text,
    format_display_number,
    format_result,
    group_integer_part,
    number_to_text,
    parse_number,
)


def test_parse_number_leading_prefix():
    assert parse_number("12") == 12.0
    assert parse_number("12.") == 12.0
    assert parse_number(".5") == 0.5
    assert parse_number("-3.25") == -3.25
    assert parse_number("1e+21") == 1e21


def test_parse_number_rejects_non_numbers():
    assert parse_number("") is None
    assert parse_number(".") is None
    assert parse_number("Cannot divide by zero") is None


def test_format_result_rounds_half_away_from_zero():
    assert format_result(0.1 + 0.2) == "0.3"
    assert format_result(1.005) == "1.005"
    assert format_result(0.123456785) == "0.12345679"
    assert format_result(-0.123456785) == "-0.12345679"
    assert format_result(2.0) == "2"
    assert format_result(-0.0) == "0"


def test_large_results_use_exponent_form():
    assert format_result(1e21) == "1e+21"
    assert format_result(123456789012.0) == "123456789012"
    assert number_to_text(Decimal("1.5e22")) == "1.5e+22"


def test_results_use_shortest_digits():
    assert format_result(1e20 / 3) == "33333333333333330000"
    assert format_result(2.0 ** 60) == "1152921504606847000"


def test_float_to_text_avoids_exponent_for_small_values():
    assert float_to_text(0.1) == "0.1"
    assert float_to_text(1e-7) == "0.0000001"
    assert float_to_text(25.0) == "25"


def test_group_integer_part():
    assert group_integer_part("1234567") == "1,234,567"
    assert group_integer_part("-1000") == "-1,000"
    assert group_integer_part("0") == "0"
    assert group_integer_part("") is None
    assert group_integer_part("Result too large") is None


def test_format_display_number():
    assert format_display_number("1234.") == "1,234."
    assert format_display_number("1000.000") == "1,000.000"
    assert format_display_number("1e+21") == "1,000,000,000,000,000,000,000"
    assert format_display_number("Result too large") == "Result too large"
