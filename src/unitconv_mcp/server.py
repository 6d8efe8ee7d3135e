"""FastMCP server creation and tool/resource registration."""

from __future__ import annotations

from fastmcp import FastMCP

from unitconv_mcp import __version__
from unitconv_mcp.config import UnitConvMCPConfig
from unitconv_mcp.engine.registry import get_registry
from unitconv_mcp.logging_config import get_logger, setup_logging
from unitconv_mcp.resources.definitions import register_resources
from unitconv_mcp.tools import conversion
from unitconv_mcp.utils.change_log import ChangeLog

logger = get_logger("server")


def create_server(config: UnitConvMCPConfig | None = None) -> FastMCP:
    """Create and configure the unit conversion MCP server.

    Args:
        config: Server configuration. Uses defaults/env vars if not provided.

    Returns:
        Configured FastMCP server instance ready to run.
    """
    if config is None:
        config = UnitConvMCPConfig()

    setup_logging(
        level=config.log_level.value,
        log_file=config.get_log_file_path(),
    )
    logger.info("Unit Converter MCP Server v%s starting", __version__)

    registry = get_registry()
    change_log = ChangeLog(config.get_change_log_path())

    mcp = FastMCP(
        "Unit Converter MCP Server",
        version=__version__,
    )

    conversion.register_tools(mcp, registry, change_log, config)
    register_resources(mcp, registry, config)

    enabled = [c.id for c in registry.list_categories() if config.is_category_enabled(c.id)]
    logger.info(
        "Server ready: %d categories enabled, same-unit rejection %s",
        len(enabled),
        "on" if config.reject_same_unit else "off",
    )

    return mcp
