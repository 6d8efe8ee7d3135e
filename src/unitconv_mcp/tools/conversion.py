"""Unit conversion tools - 5 tools."""

from __future__ import annotations

import json
from typing import Any

from fastmcp import FastMCP

from unitconv_mcp.config import UnitConvMCPConfig
from unitconv_mcp.engine.converter import convert
from unitconv_mcp.engine.formatter import format_quantity, format_value
from unitconv_mcp.engine.registry import UnitRegistry
from unitconv_mcp.logging_config import get_logger
from unitconv_mcp.models.errors import FormatError, UnknownCategoryError, UnknownUnitError, ValidationError
from unitconv_mcp.models.types import ConversionFailure, ErrorKind, UnitDefinition
from unitconv_mcp.utils.change_log import ChangeLog
from unitconv_mcp.utils.validation import parse_amount, validate_distinct_units

logger = get_logger("tools.conversion")

# Short messages shown to users for each failure kind.
USER_MESSAGES = {
    ErrorKind.UNKNOWN_CATEGORY: "This conversion category is not available",
    ErrorKind.UNKNOWN_UNIT: "Conversion not supported between these units",
    ErrorKind.INVALID_AMOUNT: "Please enter a valid number for this conversion",
}


def register_tools(
    mcp: FastMCP,
    registry: UnitRegistry,
    change_log: ChangeLog,
    config: UnitConvMCPConfig,
) -> None:
    """Register unit conversion tools on the MCP server."""

    @mcp.tool()
    def list_categories() -> str:
        """List the measurement categories available for conversion.

        Returns:
            JSON with category ids, names, base units and unit counts.
        """
        categories = [
            {
                "id": c.id,
                "name": c.name,
                "base_unit": c.base_unit,
                "unit_count": len(c.units),
                "allow_negative": c.allow_negative,
            }
            for c in registry.list_categories()
            if config.is_category_enabled(c.id)
        ]
        change_log.record("list_categories", {})
        return json.dumps({
            "status": "success",
            "count": len(categories),
            "categories": categories,
        }, indent=2)

    @mcp.tool()
    def list_units(category: str) -> str:
        """List the units of a category in presentation order (most common first).

        Args:
            category: Category id (e.g. 'volume', 'planeAngle', 'temperature').

        Returns:
            JSON with unit codes, display names and descriptions.
        """
        params = {"category": category}
        if not config.is_category_enabled(category) or category not in registry:
            return _category_error(change_log, "list_units", params, category)

        units = [
            _unit_summary(u, registry.get_category(category).base_unit)
            for u in registry.list_units(category)
        ]
        change_log.record("list_units", params)
        return json.dumps({
            "status": "success",
            "category": category,
            "count": len(units),
            "units": units,
        }, indent=2)

    @mcp.tool()
    def get_unit_info(category: str, unit: str) -> str:
        """Get the definition of a single unit, including its conversion factor.

        Args:
            category: Category id (e.g. 'volume').
            unit: Unit code or alias (e.g. 'usGallon', 'litre').

        Returns:
            JSON with the unit's code, display name, factor to the base unit and aliases.
        """
        params = {"category": category, "unit": unit}
        if not config.is_category_enabled(category):
            return _category_error(change_log, "get_unit_info", params, category)
        try:
            definition = registry.get_unit(category, unit)
        except UnknownCategoryError:
            return _category_error(change_log, "get_unit_info", params, category)
        except UnknownUnitError as e:
            failure = ConversionFailure(
                kind=ErrorKind.UNKNOWN_UNIT, message=str(e), category=category, code=unit,
            )
            return _failure_response(change_log, "get_unit_info", params, failure)

        base = registry.get_category(category).base_unit
        change_log.record("get_unit_info", params)
        return json.dumps({
            "status": "success",
            "category": category,
            **_unit_summary(definition, base),
            "to_base_factor": definition.to_base_factor,
            "affine_offset": definition.affine_offset,
        }, indent=2)

    @mcp.tool()
    def convert_units(category: str, from_unit: str, to_unit: str, amount: str) -> str:
        """Convert an amount between two units of the same category.

        Args:
            category: Category id (e.g. 'volume', 'planeAngle', 'length').
            from_unit: Source unit code or alias (e.g. 'usGallon', 'degree').
            to_unit: Target unit code or alias (e.g. 'liter', 'radian').
            amount: Number to convert, as text (e.g. '12.5', '3e-7').

        Returns:
            JSON with the raw value, the formatted value and a display string like '3.785410 Liter'.
        """
        params = {"category": category, "from_unit": from_unit, "to_unit": to_unit, "amount": amount}
        if not config.is_category_enabled(category):
            return _category_error(change_log, "convert_units", params, category)

        try:
            value = parse_amount(amount)
            if config.reject_same_unit:
                validate_distinct_units(registry, category, from_unit, to_unit)
        except ValidationError as e:
            change_log.record("convert_units", params, result_status="error", error=str(e))
            return json.dumps({"status": "error", "kind": "invalid_input", "message": str(e)}, indent=2)

        result = convert(category, from_unit, to_unit, value, registry=registry)
        if not result.ok:
            return _failure_response(change_log, "convert_units", params, result.error)

        target = registry.get_unit(category, to_unit)
        change_log.record("convert_units", params)
        return json.dumps({
            "status": "success",
            "category": category,
            "from_unit": registry.get_unit(category, from_unit).code,
            "to_unit": target.code,
            "amount": value,
            "value": result.value,
            "formatted": format_value(result.value),
            "display": format_quantity(result.value, target),
        }, indent=2)

    @mcp.tool(name="format_value")
    def format_value_tool(value: float) -> str:
        """Format a number the way conversion results are displayed.

        Args:
            value: Number to format.

        Returns:
            JSON with the formatted string (exponential, fixed or grouped by magnitude).
        """
        params = {"value": value}
        try:
            formatted = format_value(value)
        except FormatError as e:
            logger.warning("format_value called with unformattable input: %s", e)
            change_log.record("format_value", params, result_status="error", error=str(e))
            return json.dumps({"status": "error", "kind": "format_error", "message": str(e)}, indent=2)

        change_log.record("format_value", params)
        return json.dumps({"status": "success", "value": value, "formatted": formatted}, indent=2)


def _unit_summary(unit: UnitDefinition, base_unit: str) -> dict[str, Any]:
    return {
        "code": unit.code,
        "display_name": unit.display_name,
        "description": unit.description,
        "aliases": list(unit.aliases),
        "is_base": unit.code == base_unit,
    }


def _category_error(change_log: ChangeLog, tool: str, params: dict[str, Any], category: str) -> str:
    failure = ConversionFailure(
        kind=ErrorKind.UNKNOWN_CATEGORY,
        message=f"Unknown category: '{category}'",
        category=category,
    )
    return _failure_response(change_log, tool, params, failure)


def _failure_response(
    change_log: ChangeLog,
    tool: str,
    params: dict[str, Any],
    failure: ConversionFailure,
) -> str:
    change_log.record(tool, params, result_status="error", error=failure.message)
    response: dict[str, Any] = {
        "status": "error",
        "kind": failure.kind.value,
        "message": USER_MESSAGES[failure.kind],
        "detail": failure.message,
    }
    if failure.side is not None:
        response["side"] = failure.side.value
    if failure.code is not None:
        response["code"] = failure.code
    return json.dumps(response, indent=2)
