"""Directed conversion edges between two unprefixed units of one dimension."""

from __future__ import annotations

from dataclasses import dataclass

from unitgraph.core.conversion.value import ConversionValue
from unitgraph.core.errors import DomainError


@dataclass(frozen=True)
class Conversion:
    """``value_dest = value_src * factor``."""

    dimension: str
    src: str
    dest: str
    factor: ConversionValue

    @property
    def value(self) -> float:
        return self.factor.value

    @property
    def relative_error(self) -> float:
        return self.factor.relative_error

    def invert(self) -> Conversion:
        """dest -> src. The relative error is unchanged."""
        return Conversion(self.dimension, self.dest, self.src, self.factor.inv())

    # ── Two-hop composition ─────────────────────────────────────────────
    # Each method is called on the first edge and given the second; the
    # shared unit M is the one the two edges have in common.

    def combine_sequential(self, other: Conversion) -> Conversion:
        """A->M then M->B gives A->B."""
        self._check_shared(self.dest, other.src)
        return Conversion(self.dimension, self.src, other.dest, self.factor * other.factor)

    def combine_divergent(self, other: Conversion) -> Conversion:
        """M->A and M->B give A->B."""
        self._check_shared(self.src, other.src)
        return Conversion(self.dimension, self.dest, other.dest, other.factor / self.factor)

    def combine_convergent(self, other: Conversion) -> Conversion:
        """A->M and B->M give A->B."""
        self._check_shared(self.dest, other.dest)
        return Conversion(self.dimension, self.src, other.src, self.factor / other.factor)

    def combine_opposite(self, other: Conversion) -> Conversion:
        """M->A and B->M give A->B."""
        self._check_shared(self.src, other.dest)
        return Conversion(self.dimension, self.dest, other.src, (self.factor * other.factor).inv())

    def _check_shared(self, a: str, b: str) -> None:
        if a != b:
            raise DomainError(f"Conversions do not share a unit: '{a}' and '{b}'.")

    def __str__(self) -> str:
        return f"1 {self.src} = {self.factor} {self.dest}"
