"""Audit trail for tool invocations."""

from __future__ import annotations

import json
import math
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from unitconv_mcp.logging_config import get_logger

logger = get_logger("changelog")

MAX_PARAM_LENGTH = 200


class ChangeLog:
    """Appends one JSON line per tool invocation."""

    def __init__(self, log_path: Path) -> None:
        self._log_path = log_path
        self._log_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._log_path

    def record(
        self,
        tool_name: str,
        params: dict[str, Any],
        result_status: str = "success",
        error: str | None = None,
    ) -> None:
        """Record a tool invocation in the audit log."""
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "tool": tool_name,
            "params": _sanitize_params(params),
            "status": result_status,
        }
        if error:
            entry["error"] = error

        try:
            with open(self._log_path, "a", encoding="utf-8") as f:
                f.write(json.dumps(entry) + "\n")
        except OSError as e:
            logger.error("Failed to write change log: %s", e)

    def get_recent(self, count: int = 20) -> list[dict[str, Any]]:
        """Get the most recent log entries, oldest first."""
        entries: list[dict[str, Any]] = []
        if not self._log_path.exists():
            return entries

        try:
            lines = self._log_path.read_text(encoding="utf-8").strip().split("\n")
            for line in lines[-count:]:
                if line:
                    entries.append(json.loads(line))
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to read change log: %s", e)

        return entries


def _sanitize_params(params: dict[str, Any]) -> dict[str, Any]:
    """Truncate long strings and stringify non-finite floats so every entry is valid JSON."""
    sanitized = {}
    for key, value in params.items():
        if isinstance(value, str) and len(value) > MAX_PARAM_LENGTH:
            sanitized[key] = value[:MAX_PARAM_LENGTH] + "...(truncated)"
        elif isinstance(value, float) and not math.isfinite(value):
            sanitized[key] = str(value)
        else:
            sanitized[key] = value
    return sanitized
