"""Configuration management using Pydantic Settings."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class TransportType(str, Enum):
    STDIO = "stdio"
    SSE = "sse"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class UnitConvMCPConfig(BaseSettings):
    """Configuration for the unit conversion MCP server, loaded from environment variables."""

    model_config = {"env_prefix": "UNITCONV_MCP_", "env_file": ".env", "extra": "ignore"}

    transport: TransportType = Field(
        default=TransportType.STDIO,
        description="MCP transport: stdio or sse",
    )
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Path to log file. Defaults to ~/.config/.unitconv-mcp/logs/server.log",
    )
    change_log_path: Optional[Path] = Field(
        default=None,
        description="Path to tool audit log. Defaults to ~/.config/.unitconv-mcp/logs/changes.jsonl",
    )
    reject_same_unit: bool = Field(
        default=True,
        description="Refuse conversions whose source and target units are the same",
    )
    enabled_categories: Optional[list[str]] = Field(
        default=None,
        description="Categories exposed by the server. Defaults to all registered categories",
    )
    sse_host: str = Field(default="127.0.0.1", description="SSE server host")
    sse_port: int = Field(default=8765, description="SSE server port")

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if self.enabled_categories is not None:
            from unitconv_mcp.engine.registry import get_registry

            registry = get_registry()
            unknown = [c for c in self.enabled_categories if c not in registry]
            if unknown:
                raise ValueError(f"Unknown categories in enabled_categories: {', '.join(unknown)}")

    def is_category_enabled(self, category_id: str) -> bool:
        return self.enabled_categories is None or category_id in self.enabled_categories

    def get_data_dir(self) -> Path:
        """Get the platform-appropriate data directory."""
        if os.name == "nt":
            base = Path(os.environ.get("USERPROFILE", Path.home()))
        else:
            base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
        data_dir = base / ".unitconv-mcp"
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_log_dir(self) -> Path:
        """Get the log directory, creating it if needed."""
        log_dir = self.get_data_dir() / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        return log_dir

    def get_log_file_path(self) -> Path:
        """Resolve the log file path."""
        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            return self.log_file
        return self.get_log_dir() / "server.log"

    def get_change_log_path(self) -> Path:
        """Resolve the change log path."""
        if self.change_log_path:
            self.change_log_path.parent.mkdir(parents=True, exist_ok=True)
            return self.change_log_path
        return self.get_log_dir() / "changes.jsonl"
