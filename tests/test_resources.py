"""Tests for MCP resource payloads."""

from __future__ import annotations

import pytest

from unitconv_mcp.config import UnitConvMCPConfig
from unitconv_mcp.engine.registry import UnitRegistry
from unitconv_mcp.models.errors import UnknownCategoryError
from unitconv_mcp.resources.definitions import categories_payload, category_payload


class TestCategoriesPayload:
    def test_all_categories(self, registry: UnitRegistry, tmp_config: UnitConvMCPConfig):
        payload = categories_payload(registry, tmp_config)
        assert payload["count"] == len(registry)
        assert payload["categories"][0]["id"] == "volume"


class TestCategoryPayload:
    def test_unit_table(self, registry: UnitRegistry, tmp_config: UnitConvMCPConfig):
        payload = category_payload(registry, tmp_config, "temperature")
        assert payload["base_unit"] == "kelvin"
        codes = [u["code"] for u in payload["units"]]
        assert codes == ["celsius", "fahrenheit", "kelvin", "rankine"]

    def test_unknown_category(self, registry: UnitRegistry, tmp_config: UnitConvMCPConfig):
        with pytest.raises(UnknownCategoryError):
            category_payload(registry, tmp_config, "currency")

    def test_disabled_category(self, registry: UnitRegistry, tmp_path):
        config = UnitConvMCPConfig(enabled_categories=["volume"], change_log_path=tmp_path / "c.jsonl")
        with pytest.raises(UnknownCategoryError):
            category_payload(registry, config, "length")
