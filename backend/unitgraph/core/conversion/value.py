"""Conversion factors carrying a propagated relative error."""

from __future__ import annotations

import math
from dataclasses import dataclass


def estimate_relative_error(value: float) -> float:
    """Half an ULP relative to ``value``; zero for values that are exact integers."""
    if value == 0 or not math.isfinite(value) or value.is_integer():
        return 0.0
    return math.ulp(value) * 0.5 / abs(value)


@dataclass(frozen=True)
class ConversionValue:
    """A float with a relative error. Multiplication and division add relative errors."""

    value: float
    relative_error: float | None = None

    def __post_init__(self) -> None:
        value = float(self.value)
        object.__setattr__(self, "value", value)
        if self.relative_error is None:
            object.__setattr__(self, "relative_error", estimate_relative_error(value))
        elif self.relative_error < 0 or math.isnan(self.relative_error):
            raise ValueError(f"Relative error must be non-negative, got {self.relative_error}")

    @classmethod
    def exact(cls, value: float) -> ConversionValue:
        return cls(value, 0.0)

    @property
    def absolute_error(self) -> float:
        return abs(self.value) * self.relative_error

    @property
    def is_exact(self) -> bool:
        return self.relative_error == 0

    def significant_digits(self) -> int | None:
        """Number of trustworthy decimal digits, or None when the value is exact."""
        if self.relative_error == 0:
            return None
        if not math.isfinite(self.relative_error):
            return 0
        return max(0, math.floor(-math.log10(self.relative_error)))

    # ── Arithmetic ──────────────────────────────────────────────────────

    def __mul__(self, other: ConversionValue | float) -> ConversionValue:
        other = _coerce(other)
        return ConversionValue(self.value * other.value, self.relative_error + other.relative_error)

    __rmul__ = __mul__

    def __truediv__(self, other: ConversionValue | float) -> ConversionValue:
        other = _coerce(other)
        if other.value == 0:
            raise ZeroDivisionError("Cannot divide by a zero conversion factor")
        return ConversionValue(self.value / other.value, self.relative_error + other.relative_error)

    def __rtruediv__(self, other: float) -> ConversionValue:
        return _coerce(other) / self

    def inv(self) -> ConversionValue:
        """Reciprocal; the relative error is unchanged."""
        if self.value == 0:
            raise ZeroDivisionError("Cannot invert a zero conversion factor")
        return ConversionValue(1.0 / self.value, self.relative_error)

    def __pow__(self, exponent: int) -> ConversionValue:
        if exponent == 0:
            return ConversionValue(1.0, 0.0)
        return ConversionValue(self.value ** exponent, self.relative_error * abs(exponent))

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:.15g} ± {self.absolute_error:.2e}"


def _coerce(other: ConversionValue | float) -> ConversionValue:
    if isinstance(other, ConversionValue):
        return other
    return ConversionValue.exact(other)
