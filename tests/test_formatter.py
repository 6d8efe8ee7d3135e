"""Tests for result formatting."""

from __future__ import annotations

import pytest

from unitconv_mcp.engine.formatter import format_quantity, format_value
from unitconv_mcp.engine.registry import get_unit
from unitconv_mcp.models.errors import FormatError


class TestExponentialBand:
    def test_tiny_value(self):
        assert format_value(0.0000003) == "3.000000e-7"

    def test_uses_exponent_notation(self):
        text = format_value(0.0000001)
        assert "e-" in text
        assert text == "1.000000e-7"

    def test_very_small_value(self):
        assert format_value(1.23456789e-12) == "1.234568e-12"

    def test_negative_tiny_value(self):
        assert format_value(-5e-8) == "-5.000000e-8"


class TestFixedBand:
    def test_zero(self):
        assert format_value(0) == "0"
        assert format_value(0.0) == "0"
        assert format_value(-0.0) == "0"

    def test_plain_decimal(self):
        text = format_value(42.5)
        assert text == "42.5"
        assert "e" not in text

    def test_whole_number_has_no_point(self):
        assert format_value(100.0) == "100"
        assert format_value(7) == "7"

    def test_rounds_to_six_digits(self):
        assert format_value(3.14159265) == "3.141593"

    def test_small_fraction(self):
        assert format_value(0.000001) == "0.000001"
        assert format_value(0.25) == "0.25"

    def test_negative(self):
        assert format_value(-12.75) == "-12.75"

    def test_just_below_grouping(self):
        assert format_value(999.5) == "999.5"


class TestGroupedBand:
    def test_grouping_with_minimum_decimals(self):
        assert format_value(1500000) == "1,500,000.00"

    def test_grouping_keeps_significant_decimals(self):
        text = format_value(1234567.891)
        assert text == "1,234,567.891"
        assert "," in text

    def test_threshold(self):
        assert format_value(1000) == "1,000.00"

    def test_caps_at_six_decimals(self):
        assert format_value(1234.123456789) == "1,234.123457"

    def test_negative(self):
        assert format_value(-2500.5) == "-2,500.50"


class TestFailures:
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite(self, value):
        with pytest.raises(FormatError):
            format_value(value)

    @pytest.mark.parametrize("value", ["12", None, True])
    def test_non_numeric(self, value):
        with pytest.raises(FormatError):
            format_value(value)

    def test_int_too_large_for_float(self):
        with pytest.raises(FormatError):
            format_value(10 ** 400)

    def test_large_int_within_float_range(self):
        assert format_value(10 ** 6) == "1,000,000.00"


class TestFormatQuantity:
    def test_uses_short_label(self):
        assert format_quantity(12.5, get_unit("planeAngle", "radian")) == "12.5 Radian"

    def test_grouped_with_label(self):
        assert format_quantity(2000, get_unit("volume", "milliliter")) == "2,000.00 Milliliter"
