"""Render conversion results for display using magnitude bands."""

from __future__ import annotations

import math

from unitconv_mcp.models.errors import FormatError
from unitconv_mcp.models.types import UnitDefinition

# Below this magnitude results switch to exponential notation.
EXPONENTIAL_THRESHOLD = 1e-6
# At or above this magnitude results are digit-grouped.
GROUPING_THRESHOLD = 1000

MAX_FRACTION_DIGITS = 6
MIN_GROUPED_FRACTION_DIGITS = 2


def format_value(value: float) -> str:
    """Format a conversion result for display.

    - ``|v| < 1e-6``: exponential, six fractional digits (``3.000000e-7``)
    - ``|v| < 1000``: fixed, at most six fractional digits, trailing zeros dropped
    - otherwise: comma-grouped with two to six fractional digits

    Raises:
        FormatError: If ``value`` is NaN, infinite or not a number.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FormatError(f"Cannot format non-numeric value {value!r}")
    try:
        value = float(value)
    except OverflowError:
        raise FormatError("Cannot format a value too large for a float") from None
    if not math.isfinite(value):
        raise FormatError(f"Cannot format non-finite value {value}", {"value": str(value)})

    magnitude = abs(value)
    if magnitude == 0:
        return "0"
    if magnitude < EXPONENTIAL_THRESHOLD:
        return _exponential(value)
    if magnitude < GROUPING_THRESHOLD:
        return _fixed(value)
    return _grouped(value)


def format_quantity(value: float, unit: UnitDefinition) -> str:
    """Format a value followed by the unit's short label, e.g. '12.5 Radian'."""
    return f"{format_value(value)} {unit.label}"


def _exponential(value: float) -> str:
    mantissa, exponent = f"{value:.{MAX_FRACTION_DIGITS}e}".split("e")
    exp = int(exponent)
    sign = "-" if exp < 0 else "+"
    return f"{mantissa}e{sign}{abs(exp)}"


def _fixed(value: float) -> str:
    return f"{value:.{MAX_FRACTION_DIGITS}f}".rstrip("0").rstrip(".")


def _grouped(value: float) -> str:
    text = f"{value:,.{MAX_FRACTION_DIGITS}f}"
    whole, fraction = text.split(".")
    fraction = fraction.rstrip("0").ljust(MIN_GROUPED_FRACTION_DIGITS, "0")
    return f"{whole}.{fraction}"
