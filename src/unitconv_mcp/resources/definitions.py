"""MCP resource definitions - 2 resources."""

from __future__ import annotations

import json
from typing import Any

from fastmcp import FastMCP

from unitconv_mcp.config import UnitConvMCPConfig
from unitconv_mcp.engine.registry import UnitRegistry
from unitconv_mcp.logging_config import get_logger
from unitconv_mcp.models.errors import UnknownCategoryError

logger = get_logger("resources")


def register_resources(mcp: FastMCP, registry: UnitRegistry, config: UnitConvMCPConfig) -> None:
    """Register MCP resources on the server."""

    @mcp.resource("units://categories")
    def categories_resource() -> str:
        """Get every enabled category with its base unit.

        Returns category ids, names, base units and unit counts.
        """
        return json.dumps(categories_payload(registry, config), indent=2)

    @mcp.resource("units://category/{category_id}")
    def category_resource(category_id: str) -> str:
        """Get the full unit table of one category.

        Returns units in presentation order with their factors to the base unit.
        """
        return json.dumps(category_payload(registry, config, category_id), indent=2)


def categories_payload(registry: UnitRegistry, config: UnitConvMCPConfig) -> dict[str, Any]:
    categories = [
        {"id": c.id, "name": c.name, "base_unit": c.base_unit, "unit_count": len(c.units)}
        for c in registry.list_categories()
        if config.is_category_enabled(c.id)
    ]
    return {"categories": categories, "count": len(categories)}


def category_payload(registry: UnitRegistry, config: UnitConvMCPConfig, category_id: str) -> dict[str, Any]:
    """Unit table for one category.

    Raises:
        UnknownCategoryError: If the category is unknown or disabled.
    """
    if not config.is_category_enabled(category_id):
        raise UnknownCategoryError(f"Unknown category: '{category_id}'", {"category": category_id})

    category = registry.get_category(category_id)
    return {
        "id": category.id,
        "name": category.name,
        "base_unit": category.base_unit,
        "allow_negative": category.allow_negative,
        "units": [
            {
                "code": u.code,
                "display_name": u.display_name,
                "to_base_factor": u.to_base_factor,
                "affine_offset": u.affine_offset,
                "aliases": list(u.aliases),
            }
            for u in category.units
        ],
    }
