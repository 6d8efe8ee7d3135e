"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from unitconv_mcp.config import UnitConvMCPConfig
from unitconv_mcp.engine.registry import UnitRegistry, get_registry
from unitconv_mcp.models.types import Category, UnitDefinition
from unitconv_mcp.utils.change_log import ChangeLog


@pytest.fixture
def registry() -> UnitRegistry:
    return get_registry()


@pytest.fixture
def tmp_change_log(tmp_path: Path) -> ChangeLog:
    return ChangeLog(tmp_path / "test_changes.jsonl")


@pytest.fixture
def tmp_config(tmp_path: Path) -> UnitConvMCPConfig:
    return UnitConvMCPConfig(
        log_level="WARNING",
        log_file=tmp_path / "server.log",
        change_log_path=tmp_path / "changes.jsonl",
    )


@pytest.fixture
def twin_registry() -> UnitRegistry:
    """Two categories that both define a unit coded 'widget' with different factors."""
    alpha = Category(
        id="alpha",
        name="Alpha",
        base_unit="base",
        units=(
            UnitDefinition(code="base", display_name="Base (b)", to_base_factor=1.0),
            UnitDefinition(code="widget", display_name="Widget (w)", to_base_factor=10.0, aliases=("w",)),
        ),
    )
    beta = Category(
        id="beta",
        name="Beta",
        base_unit="base",
        allow_negative=False,
        units=(
            UnitDefinition(code="base", display_name="Base (b)", to_base_factor=1.0),
            UnitDefinition(code="widget", display_name="Widget (w)", to_base_factor=4.0),
            UnitDefinition(code="gizmo", display_name="Gizmo (g)", to_base_factor=0.5),
        ),
    )
    return UnitRegistry([alpha, beta])
