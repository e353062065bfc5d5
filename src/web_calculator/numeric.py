"""
=============================================================================
MODULE NAME: numeric.py
=============================================================================

INPUT:
- Operand text as typed or stored by the engine ("12", "0.", "-997").
  Grouping separators are never stored.

OUTPUT:
- Parsed floats for arithmetic, canonical result text, grouped display text.

NOTES:
- Operands stay strings inside the engine; numbers exist only transiently
  while computing or formatting.
- Results are rounded half away from zero at 1e-8 after a machine-epsilon
  nudge, so 0.1 + 0.2 renders as "0.3".
=============================================================================
"""

from __future__ import annotations

import math
import re
import sys
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

RESULT_PLACES = 8
EXPONENT_THRESHOLD = Decimal("1e21")

_QUANTUM = Decimal(1).scaleb(-RESULT_PLACES)
# Enough digits to hold any finite double quantized to 1e-8.
_PRECISION = 400
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INTEGER_PART = re.compile(r"[+-]?\d+(?:[eE][+-]?\d+)?")


def parse_number(text: str) -> Optional[float]:
    """
    Parse the leading number of an operand string.

    Trailing characters are ignored, so "12." parses as 12. Text without a
    leading number ("", ".", an error message) yields None.

    Args:
        text: Operand text

    Returns:
        The parsed float, or None if the text does not start with a number
    """
    match = _LEADING_NUMBER.match(text)
    if not match:
        return None
    return float(match.group(1))


def round_result(value: float) -> Decimal:
    """Round a finite result to RESULT_PLACES decimals, half away from zero."""
    nudged = value + math.copysign(sys.float_info.epsilon, value)
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return Decimal(nudged).quantize(_QUANTUM, rounding=ROUND_HALF_UP)


def number_to_text(value: Decimal) -> str:
    """
    Render a rounded result as operand text.

    Integers carry no fractional part, trailing zeros are dropped and
    magnitudes of 1e21 and above use exponent form ("1e+21").
    """
    if not value:
        return "0"
    if abs(value) >= EXPONENT_THRESHOLD:
        return repr(float(value))
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return format(value.normalize(), "f")


def format_result(value: float) -> str:
    # Shortest round-trip digits of the rounded value, not its binary expansion.
    return float_to_text(float(round_result(value)))


def float_to_text(value: float) -> str:
    """Render a float as operand text using its shortest round-tripping digits."""
    return number_to_text(Decimal(repr(value)))


def group_integer_part(text: str) -> Optional[str]:
    """Group an integer string with comma thousands separators."""
    if not _INTEGER_PART.fullmatch(text):
        return None
    return format(Decimal(text), ",.0f")


def format_display_number(text: str) -> str:
    """
    Format operand text for display.

    The integer part gets thousands separators; the decimal part, including
    a trailing lone point, is reattached untouched. Text whose integer part
    is not a number (error messages, ".5") keeps that part verbatim.

    Args:
        text: Operand text as stored by the engine

    Returns:
        Display string
    """
    integer_digits, point, decimal_digits = text.partition(".")
    grouped = group_integer_part(integer_digits)
    integer_display = integer_digits if grouped is None else grouped
    if point:
        return f"{integer_display}.{decimal_digits}"
    return integer_display
