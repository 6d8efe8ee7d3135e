"""Category-independent conversion through each category's base unit."""

from __future__ import annotations

import math
import numbers

from unitconv_mcp.engine.registry import UnitRegistry, get_registry
from unitconv_mcp.logging_config import get_logger
from unitconv_mcp.models.errors import (
    InvalidAmountError,
    UnknownCategoryError,
    UnknownUnitError,
)
from unitconv_mcp.models.types import (
    Category,
    ConversionRequest,
    ConversionResult,
    ErrorKind,
    UnitSide,
)

logger = get_logger("engine.converter")


def convert(
    category: str,
    from_code: str,
    to_code: str,
    amount: float,
    registry: UnitRegistry | None = None,
) -> ConversionResult:
    """Convert ``amount`` from one unit to another within a category.

    Expected failures (unknown category or unit, unusable amount) are returned
    as a failed ConversionResult rather than raised.

    Args:
        category: Category identifier, e.g. 'volume' or 'planeAngle'.
        from_code: Source unit code or alias.
        to_code: Target unit code or alias.
        amount: Finite number to convert.
        registry: Registry to resolve against. Defaults to the built-in one.

    Returns:
        ConversionResult holding either the converted value or the failure.
    """
    if registry is None:
        registry = get_registry()

    try:
        value = _convert(registry, category, from_code, to_code, amount)
    except UnknownCategoryError as e:
        logger.debug("Conversion rejected: %s", e)
        return ConversionResult.failure(
            ErrorKind.UNKNOWN_CATEGORY, str(e), category=str(category),
        )
    except UnknownUnitError as e:
        logger.debug("Conversion rejected: %s", e)
        side = UnitSide(e.side)
        code = from_code if side == UnitSide.FROM else to_code
        return ConversionResult.failure(
            ErrorKind.UNKNOWN_UNIT, str(e), category=str(category), side=side, code=str(code),
        )
    except InvalidAmountError as e:
        logger.debug("Conversion rejected: %s", e)
        return ConversionResult.failure(
            ErrorKind.INVALID_AMOUNT, str(e), category=str(category),
        )

    return ConversionResult.success(value)


def convert_or_raise(
    category: str,
    from_code: str,
    to_code: str,
    amount: float,
    registry: UnitRegistry | None = None,
) -> float:
    """Like convert(), but raises the matching ConversionError on failure."""
    if registry is None:
        registry = get_registry()
    return _convert(registry, category, from_code, to_code, amount)


def convert_request(request: ConversionRequest, registry: UnitRegistry | None = None) -> ConversionResult:
    return convert(request.category, request.from_unit, request.to_unit, request.amount, registry)


def _convert(
    registry: UnitRegistry,
    category_id: str,
    from_code: str,
    to_code: str,
    amount: float,
) -> float:
    category = registry.get_category(category_id)
    from_unit = registry.get_unit(category_id, from_code, side=UnitSide.FROM.value)
    to_unit = registry.get_unit(category_id, to_code, side=UnitSide.TO.value)
    value = _check_amount(category, amount)

    if from_unit is to_unit:
        return value

    # Multiply into the base unit first, divide out of it last.
    result = to_unit.from_base(from_unit.to_base(value))
    if not math.isfinite(result):
        raise InvalidAmountError(
            f"Converting {value} {from_unit.code} to {to_unit.code} overflows",
            {"category": category.id, "amount": value},
        )
    return result


def _check_amount(category: Category, amount: object) -> float:
    """Return ``amount`` as a float, or raise InvalidAmountError."""
    if isinstance(amount, bool) or not isinstance(amount, numbers.Real):
        raise InvalidAmountError(
            f"Amount must be a number, got {type(amount).__name__}",
            {"category": category.id},
        )
    try:
        value = float(amount)
    except OverflowError:
        raise InvalidAmountError(
            "Amount is too large to convert", {"category": category.id},
        ) from None

    if not math.isfinite(value):
        raise InvalidAmountError(
            f"Amount must be a finite number, got {value}",
            {"category": category.id},
        )
    if value < 0 and not category.allow_negative:
        raise InvalidAmountError(
            f"Negative amounts are not allowed for {category.name.lower()}",
            {"category": category.id, "amount": value},
        )
    return value
