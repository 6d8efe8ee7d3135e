"""Tests for caller-side input validation."""

from __future__ import annotations

import math

import pytest

from unitconv_mcp.engine.registry import UnitRegistry
from unitconv_mcp.models.errors import InvalidInputError, SameUnitError, ValidationError
from unitconv_mcp.utils.validation import parse_amount, validate_distinct_units


class TestParseAmount:
    def test_valid_numbers(self):
        assert parse_amount("12") == 12.0
        assert parse_amount("12.5") == 12.5
        assert parse_amount(" 0.25 ") == 0.25
        assert parse_amount(".5") == 0.5
        assert parse_amount("-3") == -3.0
        assert parse_amount("+4.") == 4.0
        assert parse_amount("3e-7") == 3e-7
        assert parse_amount("1.5E3") == 1500.0

    def test_numbers_pass_through(self):
        assert parse_amount(7) == 7.0
        assert parse_amount(2.5) == 2.5

    def test_empty_input(self):
        with pytest.raises(InvalidInputError):
            parse_amount("")
        with pytest.raises(InvalidInputError):
            parse_amount("   ")

    def test_invalid_input(self):
        for text in ("abc", "12abc", "1,000", "1..2", "nan", "inf", "Infinity", "0x10", "1_000"):
            with pytest.raises(InvalidInputError):
                parse_amount(text)

    def test_bool_rejected(self):
        with pytest.raises(InvalidInputError):
            parse_amount(True)

    def test_huge_exponent_becomes_infinite(self):
        # Left for the engine to reject as a non-finite amount.
        assert math.isinf(parse_amount("1e999"))

    def test_is_validation_error(self):
        with pytest.raises(ValidationError):
            parse_amount("x")


class TestValidateDistinctUnits:
    def test_different_units(self, registry: UnitRegistry):
        validate_distinct_units(registry, "volume", "liter", "milliliter")

    def test_same_code(self, registry: UnitRegistry):
        with pytest.raises(SameUnitError, match="must be different"):
            validate_distinct_units(registry, "volume", "liter", "liter")

    def test_alias_of_same_unit(self, registry: UnitRegistry):
        with pytest.raises(SameUnitError):
            validate_distinct_units(registry, "volume", "liter", "litre")

    def test_equivalent_but_distinct_units(self, registry: UnitRegistry):
        # Same factor, different definitions.
        validate_distinct_units(registry, "volume", "liter", "cubicDecimeter")

    def test_unknown_inputs_left_to_engine(self, registry: UnitRegistry):
        validate_distinct_units(registry, "volume", "bogus", "bogus")
        validate_distinct_units(registry, "bogus", "liter", "liter")
