"""Tests for the tool audit log."""

from __future__ import annotations

import json
from pathlib import Path

from unitconv_mcp.utils.change_log import ChangeLog


class TestChangeLog:
    def test_record_and_read_back(self, tmp_change_log: ChangeLog):
        tmp_change_log.record("convert_units", {"category": "volume", "amount": "1"})
        entries = tmp_change_log.get_recent()
        assert len(entries) == 1
        assert entries[0]["tool"] == "convert_units"
        assert entries[0]["status"] == "success"
        assert entries[0]["params"] == {"category": "volume", "amount": "1"}
        assert "timestamp" in entries[0]

    def test_error_entries(self, tmp_change_log: ChangeLog):
        tmp_change_log.record("convert_units", {}, result_status="error", error="Unknown unit")
        entry = tmp_change_log.get_recent()[0]
        assert entry["status"] == "error"
        assert entry["error"] == "Unknown unit"

    def test_recent_limit(self, tmp_change_log: ChangeLog):
        for i in range(5):
            tmp_change_log.record("format_value", {"value": float(i)})
        entries = tmp_change_log.get_recent(count=2)
        assert [e["params"]["value"] for e in entries] == [3.0, 4.0]

    def test_missing_file(self, tmp_path: Path):
        log = ChangeLog(tmp_path / "nested" / "log.jsonl")
        assert log.get_recent() == []
        assert log.path.parent.exists()

    def test_long_params_truncated(self, tmp_change_log: ChangeLog):
        tmp_change_log.record("convert_units", {"amount": "9" * 1000})
        value = tmp_change_log.get_recent()[0]["params"]["amount"]
        assert value.endswith("...(truncated)")
        assert len(value) < 300

    def test_non_finite_params_stay_valid_json(self, tmp_change_log: ChangeLog):
        tmp_change_log.record("format_value", {"value": float("nan")})
        line = tmp_change_log.path.read_text(encoding="utf-8").strip()
        assert json.loads(line)["params"]["value"] == "nan"
