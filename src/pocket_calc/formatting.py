"""Number parsing, formatting and the four binary operators."""

from __future__ import annotations

import math
from decimal import Decimal

from .state import ERROR_TEXT, MAX_ENTRY_LENGTH, Operator

SCIENTIFIC_UPPER = 1e15
SCIENTIFIC_LOWER = 1e-6
SIGNIFICANT_DIGITS = 12


def parse_number(text: str) -> float:
    """Numeric value of a display string; anything unparsable is NaN."""
    try:
        return float(text)
    except ValueError:
        return math.nan


def format_number(num: float) -> str:
    """
    Render a number for the display.

    Args:
        num: Value to render

    Returns:
        ``"Error"`` for non-finite values, scientific notation with six
        fractional digits for very large or very small magnitudes, otherwise a
        plain decimal string of at most 15 characters where possible
    """
    if not math.isfinite(num):
        return ERROR_TEXT

    magnitude = abs(num)
    if magnitude >= SCIENTIFIC_UPPER or (magnitude < SCIENTIFIC_LOWER and num != 0):
        return _exponential(num)

    text = _plain(num)
    if len(text) > MAX_ENTRY_LENGTH:
        # e.g. 0.1 + 0.2 -> 0.3
        text = _plain(float(f"{num:.{SIGNIFICANT_DIGITS}g}"))
    return text


def apply_operator(op: Operator, a: float, b: float) -> float:
    """
    Perform a single arithmetic operation.

    Division by exactly zero returns NaN instead of raising, which the reducer
    turns into the Error state.
    """
    if op is Operator.ADD:
        return a + b
    if op is Operator.SUBTRACT:
        return a - b
    if op is Operator.MULTIPLY:
        return a * b
    if op is Operator.DIVIDE:
        if b == 0:
            return math.nan
        return a / b
    raise ValueError(f"Unsupported operator: {op!r}")


def _plain(num: float) -> str:
    if num.is_integer():
        return str(int(num))
    # shortest round-tripping digits, never in exponent form
    return format(Decimal(repr(num)), "f")


def _exponential(num: float) -> str:
    mantissa, exponent = f"{num:.6e}".split("e")
    return f"{mantissa}e{int(exponent):+d}"
