"""Pydantic schemas for API request/response validation."""

from __future__ import annotations

import math
from pydantic import BaseModel, field_validator

from unitgraph.config import settings


def _check_symbol_length(v: str) -> str:
    if len(v) > settings.max_symbol_length:
        raise ValueError(f"Unit symbol is longer than {settings.max_symbol_length} characters")
    return v


class UnitRequest(BaseModel):
    symbol: str

    @field_validator("symbol")
    @classmethod
    def symbol_not_too_long(cls, v: str) -> str:
        return _check_symbol_length(v)


class ConvertRequest(BaseModel):
    value: float = 1.0
    src: str
    dest: str

    @field_validator("value")
    @classmethod
    def must_be_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Value must be a finite number")
        return v

    @field_validator("src", "dest")
    @classmethod
    def symbol_not_too_long(cls, v: str) -> str:
        return _check_symbol_length(v)


class ExpandRequest(BaseModel):
    value: float = 1.0
    symbol: str

    @field_validator("symbol")
    @classmethod
    def symbol_not_too_long(cls, v: str) -> str:
        return _check_symbol_length(v)


class DimensionRequest(BaseModel):
    code: str

    @field_validator("code")
    @classmethod
    def code_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Dimension code cannot be empty")
        return v.strip()


class UnitTermResponse(BaseModel):
    symbol: str
    unit: str
    prefix: str | None = None
    exponent: int
    dimension: str


class UnitResponse(BaseModel):
    ascii_symbol: str
    unicode_symbol: str
    dimension: str
    quantity_type: str | None = None
    terms: list[UnitTermResponse]


class ConvertResponse(BaseModel):
    value: float
    src: str
    dest: str
    factor: float
    relative_error: float
    dimension: str


class ExpandResponse(BaseModel):
    value: float
    ascii_symbol: str
    unicode_symbol: str
    dimension: str


class DimensionResponse(BaseModel):
    code: str
    axes: dict[str, int]
    names: dict[str, str]
    si_unit: str
    quantity_type: str | None = None
