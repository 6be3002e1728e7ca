"""Pydantic models for recipe quantities.

Values and numbers are tagged unions keyed on ``type``. The recipe parser
serializes them adjacently tagged (``{"type": ..., "value": ...}``); the flat
form (``{"type": "fraction", "whole": 1, ...}``) is accepted as well.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _unwrap_content(data: Any) -> Any:
    """Flatten ``{"type": t, "value": {...}}`` into ``{"type": t, ...}``."""
    if isinstance(data, dict) and isinstance(data.get("value"), dict):
        if set(data) <= {"type", "value"}:
            flat = dict(data["value"])
            if "type" in data:
                flat["type"] = data["type"]
            return flat
    return data


class FractionNumber(BaseModel):
    """Mixed number ``whole + num/den`` with its approximation error."""

    type: Literal["fraction"] = "fraction"
    whole: int = 0
    num: int = 0
    den: int = 1
    err: float = 0.0

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _flatten(cls, data: Any) -> Any:
        return _unwrap_content(data)

    @model_validator(mode="after")
    def _check_parts(self) -> FractionNumber:
        if self.whole < 0:
            raise ValueError("whole must not be negative")
        if self.num < 0:
            raise ValueError("num must not be negative")
        if self.num > 0 and self.den <= 0:
            raise ValueError("den must be positive when num is positive")
        return self


class FloatNumber(BaseModel):
    """Plain decimal number."""

    type: Literal["regular", "float"] = "regular"
    value: float

    model_config = ConfigDict(frozen=True)


Number = Annotated[FractionNumber | FloatNumber, Field(discriminator="type")]


class NumberValue(BaseModel):
    type: Literal["number"] = "number"
    value: Number

    model_config = ConfigDict(frozen=True)


class RangeValue(BaseModel):
    type: Literal["range"] = "range"
    start: Number
    end: Number

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _flatten(cls, data: Any) -> Any:
        return _unwrap_content(data)


class TextValue(BaseModel):
    """Opaque, already formatted value."""

    type: Literal["text"] = "text"
    value: str

    model_config = ConfigDict(frozen=True)


Value = Annotated[NumberValue | RangeValue | TextValue, Field(discriminator="type")]


class Quantity(BaseModel):
    """A value with an optional unit of measure."""

    value: Value
    unit: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_convertible(self) -> bool:
        """Only quantities with a non-empty unit can be converted to another unit."""
        return bool(self.unit)
