"""Tests for the command-line entry point."""

from __future__ import annotations

import sys

import pytest

from unitconv_mcp.__main__ import main


class TestCheck:
    def test_prints_registry(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture):
        monkeypatch.setattr(sys, "argv", ["unitconv-mcp", "--check"])
        main()
        out = capsys.readouterr().out
        assert "Unit Converter MCP Server" in out
        assert "volume" in out
        assert "base: radian" in out

    def test_version(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture):
        monkeypatch.setattr(sys, "argv", ["unitconv-mcp", "--version"])
        with pytest.raises(SystemExit):
            main()
        assert "unitconv-mcp" in capsys.readouterr().out
