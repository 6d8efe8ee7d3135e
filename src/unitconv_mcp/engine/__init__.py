"""Unit registry, conversion engine and result formatter."""

from unitconv_mcp.engine.converter import convert, convert_or_raise, convert_request
from unitconv_mcp.engine.formatter import format_quantity, format_value
from unitconv_mcp.engine.registry import UnitRegistry, get_registry, get_unit, list_units

__all__ = [
    "UnitRegistry",
    "convert",
    "convert_or_raise",
    "convert_request",
    "format_quantity",
    "format_value",
    "get_registry",
    "get_unit",
    "list_units",
]
