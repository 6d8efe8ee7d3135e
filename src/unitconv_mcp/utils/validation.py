"""Caller-side validation of raw user input before it reaches the engine."""

from __future__ import annotations

import re

from unitconv_mcp.engine.registry import UnitRegistry
from unitconv_mcp.models.errors import (
    InvalidInputError,
    SameUnitError,
    UnknownCategoryError,
    UnknownUnitError,
)

# Plain decimal or scientific notation, optional sign: 12, -0.5, .25, 3e-7
NUMBER_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def parse_amount(text: str | float | int) -> float:
    """Parse a user-supplied amount.

    Args:
        text: Raw input such as '12.5' or '3e-7'. Numbers pass through.

    Returns:
        The amount as a float.

    Raises:
        InvalidInputError: If the input is empty or not a plain number.
    """
    if isinstance(text, bool):
        raise InvalidInputError("Please enter a valid number")
    if isinstance(text, (int, float)):
        return float(text)

    if text is None or not str(text).strip():
        raise InvalidInputError("Please enter a value to convert")

    cleaned = str(text).strip()
    if not NUMBER_PATTERN.match(cleaned):
        raise InvalidInputError(
            f"Please enter a valid number, got '{cleaned}'",
            {"input": cleaned},
        )
    return float(cleaned)


def validate_distinct_units(
    registry: UnitRegistry,
    category_id: str,
    from_code: str,
    to_code: str,
) -> None:
    """Reject a request whose source and target resolve to the same unit.

    Unknown categories or units are left for the engine to report.

    Raises:
        SameUnitError: If both codes name the same unit.
    """
    try:
        from_unit = registry.get_unit(category_id, from_code)
        to_unit = registry.get_unit(category_id, to_code)
    except (UnknownCategoryError, UnknownUnitError):
        return

    if from_unit is to_unit:
        raise SameUnitError(
            "Source and target units must be different",
            {"category": category_id, "unit": from_unit.code},
        )
