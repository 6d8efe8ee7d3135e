"""Basic usage example for the unit conversion engine and MCP server.

For CLI usage, simply run: python -m unitconv_mcp
"""

from unitconv_mcp.config import UnitConvMCPConfig
from unitconv_mcp.engine import convert, format_quantity, get_unit, list_units
from unitconv_mcp.server import create_server


def show_conversions():
    for unit in list_units("planeAngle"):
        print(f"{unit.code:12s} {unit.display_name}")

    result = convert("volume", "usGallon", "liter", 2)
    if result.ok:
        print(format_quantity(result.value, get_unit("volume", "liter")))
    else:
        print(f"Conversion failed: {result.error.message}")


def main():
    show_conversions()

    # Create config - can also be set via environment variables
    config = UnitConvMCPConfig(
        log_level="INFO",
        reject_same_unit=True,
    )

    # Create and run the server
    mcp = create_server(config)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
