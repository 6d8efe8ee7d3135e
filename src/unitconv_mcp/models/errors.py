"""Custom exception hierarchy for the unit conversion engine."""

from __future__ import annotations


class UnitConvError(Exception):
    """Base exception for all unit conversion errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}


class ConversionError(UnitConvError):
    """A conversion request could not be satisfied."""


class UnknownCategoryError(ConversionError):
    """Category identifier does not exist in the registry."""


class UnknownUnitError(ConversionError):
    """Unit code does not exist within the requested category."""

    def __init__(self, message: str, side: str | None = None, details: dict | None = None):
        super().__init__(message, details)
        self.side = side


class InvalidAmountError(ConversionError):
    """Amount is not a finite number or violates the category's policy."""


class FormatError(UnitConvError):
    """Formatter received a value it refuses to render."""


class RegistryError(UnitConvError):
    """Unit table is malformed and the registry cannot be built."""


class ValidationError(UnitConvError):
    """Caller-side input validation failed."""


class InvalidInputError(ValidationError):
    """Raw amount text is empty or not a number."""


class SameUnitError(ValidationError):
    """Source and target units are identical where the caller forbids it."""
