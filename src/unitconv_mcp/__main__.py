"""CLI entry point: python -m unitconv_mcp"""

from __future__ import annotations

import argparse

from unitconv_mcp import __version__
from unitconv_mcp.config import LogLevel, TransportType, UnitConvMCPConfig


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Unit Converter MCP Server - category-based unit conversion over MCP",
    )
    parser.add_argument(
        "--version", action="version", version=f"unitconv-mcp {__version__}",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=None,
        help="MCP transport (default: stdio)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--sse-host",
        default=None,
        help="SSE server host (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--sse-port",
        type=int,
        default=None,
        help="SSE server port (default: 8765)",
    )
    parser.add_argument(
        "--allow-same-unit",
        action="store_true",
        help="Accept conversions whose source and target units are identical",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Print the unit registry summary and exit",
    )

    args = parser.parse_args()

    if args.check:
        _check_registry()
        return

    # Build config from CLI args + env vars
    overrides = {}
    if args.transport:
        overrides["transport"] = TransportType(args.transport)
    if args.log_level:
        overrides["log_level"] = LogLevel(args.log_level)
    if args.sse_host:
        overrides["sse_host"] = args.sse_host
    if args.sse_port:
        overrides["sse_port"] = args.sse_port
    if args.allow_same_unit:
        overrides["reject_same_unit"] = False

    config = UnitConvMCPConfig(**overrides)

    from unitconv_mcp.server import create_server
    mcp = create_server(config)

    if config.transport == TransportType.SSE:
        mcp.run(transport="sse", host=config.sse_host, port=config.sse_port)
    else:
        mcp.run(transport="stdio")


def _check_registry() -> None:
    """Print the registered categories and exit."""
    from unitconv_mcp.engine.registry import get_registry

    print(f"Unit Converter MCP Server v{__version__}")
    print()

    registry = get_registry()
    print("Categories:")
    for category in registry.list_categories():
        print(f"  {category.id:12s}: {len(category.units):2d} units (base: {category.base_unit})")


if __name__ == "__main__":
    main()
