"""Pydantic models for units, categories and conversion results."""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from unitconv_mcp.models.errors import (
    ConversionError,
    InvalidAmountError,
    UnknownCategoryError,
    UnknownUnitError,
)


# --- Enums ---

class ErrorKind(str, Enum):
    UNKNOWN_CATEGORY = "unknown_category"
    UNKNOWN_UNIT = "unknown_unit"
    INVALID_AMOUNT = "invalid_amount"


class UnitSide(str, Enum):
    FROM = "from"
    TO = "to"


# --- Registry Models ---

class UnitDefinition(BaseModel):
    """One convertible unit: ``value_in_base = value * to_base_factor + affine_offset``."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(description="Stable identifier, unique within its category (e.g. usGallon)")
    display_name: str = Field(description="Human-readable label with symbol (e.g. 'US Gallon (gal)')")
    to_base_factor: float = Field(description="Multiplier converting one of this unit to the base unit")
    affine_offset: float = Field(default=0.0, description="Additive offset for affine scales")
    aliases: tuple[str, ...] = Field(default=(), description="Extra exact lookup keys")
    description: str = Field(default="", description="Short hint shown next to the unit")

    @field_validator("to_base_factor")
    @classmethod
    def _factor_positive_finite(cls, value: float) -> float:
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"to_base_factor must be positive and finite, got {value}")
        return value

    @field_validator("affine_offset")
    @classmethod
    def _offset_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError(f"affine_offset must be finite, got {value}")
        return value

    @property
    def label(self) -> str:
        """Short name used in result strings, e.g. 'Radian' for 'Radian (rad)'."""
        return self.display_name.split(" ")[0]

    @property
    def is_affine(self) -> bool:
        return self.affine_offset != 0.0

    def to_base(self, value: float) -> float:
        base = value * self.to_base_factor
        if self.affine_offset:
            base += self.affine_offset
        return base

    def from_base(self, value: float) -> float:
        if self.affine_offset:
            value -= self.affine_offset
        return value / self.to_base_factor


class Category(BaseModel):
    """A measurement dimension and its ordered units."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Category identifier (e.g. volume, planeAngle)")
    name: str = Field(description="Human-readable category name")
    base_unit: str = Field(description="Code of the canonical base unit")
    units: tuple[UnitDefinition, ...] = Field(description="Units in presentation order")
    allow_negative: bool = Field(default=True, description="Whether negative amounts are accepted")

    @property
    def unit_codes(self) -> list[str]:
        return [u.code for u in self.units]


# --- Conversion Models ---

class ConversionRequest(BaseModel):
    category: str
    from_unit: str
    to_unit: str
    amount: float


class ConversionFailure(BaseModel):
    kind: ErrorKind
    message: str
    category: str = ""
    side: Optional[UnitSide] = None
    code: Optional[str] = None

    def to_exception(self) -> ConversionError:
        details = self.model_dump(mode="json", exclude_none=True)
        if self.kind == ErrorKind.UNKNOWN_CATEGORY:
            return UnknownCategoryError(self.message, details)
        if self.kind == ErrorKind.UNKNOWN_UNIT:
            side = self.side.value if self.side else None
            return UnknownUnitError(self.message, side=side, details=details)
        return InvalidAmountError(self.message, details)


class ConversionResult(BaseModel):
    """Either a finite ``value`` or an ``error``, never both."""

    value: Optional[float] = None
    error: Optional[ConversionFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        """Return the value, raising the matching ConversionError on failure."""
        if self.error is not None:
            raise self.error.to_exception()
        return self.value

    @classmethod
    def success(cls, value: float) -> ConversionResult:
        return cls(value=value)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        category: str = "",
        side: UnitSide | None = None,
        code: str | None = None,
    ) -> ConversionResult:
        return cls(error=ConversionFailure(
            kind=kind, message=message, category=category, side=side, code=code,
        ))
