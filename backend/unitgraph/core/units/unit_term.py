"""A single unit with an optional prefix and an exponent, e.g. ``km2`` or ``s⁻¹``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from unitgraph.core import dimensions
from unitgraph.core.errors import DomainError, FormatError
from unitgraph.core.parser.ast_nodes import TermNode
from unitgraph.core.parser.parser import parse_expression
from unitgraph.core.units.prefix import Prefix
from unitgraph.core.units.unit import Unit
from unitgraph.utils.superscript import to_superscript

if TYPE_CHECKING:
    from unitgraph.core.registry.units import UnitRegistry

SCALAR = Unit(name="scalar", ascii_symbol="", dimension=dimensions.DIMENSIONLESS, quantity_type="dimensionless")


@dataclass(frozen=True, eq=False)
class UnitTerm:
    unit: Unit
    prefix: Prefix | None = None
    exponent: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.exponent, int) or isinstance(self.exponent, bool):
            raise DomainError(f"Exponent must be an integer, got {self.exponent!r}.")
        if self.exponent == 0:
            raise DomainError(f"The unit '{self.unit.ascii_symbol}' cannot have an exponent of 0.")
        if abs(self.exponent) > dimensions.MAX_EXPONENT:
            raise DomainError(
                f"Exponent {self.exponent} for '{self.unit.ascii_symbol}' is outside the range "
                f"[-{dimensions.MAX_EXPONENT}, {dimensions.MAX_EXPONENT}]."
            )
        if self.prefix is not None and not self.unit.accepts_prefix(self.prefix):
            raise DomainError(
                f"The unit '{self.unit.ascii_symbol}' does not accept the prefix '{self.prefix.ascii_symbol}'."
            )

    # ── Construction ────────────────────────────────────────────────────

    @classmethod
    def parse(cls, symbol: str, units: UnitRegistry) -> UnitTerm:
        """Parse one term such as ``km2``. The empty string is the scalar term."""
        expression = parse_expression(symbol)
        if expression.is_empty:
            return cls(units.get_by_symbol("") or SCALAR)
        if len(expression.terms) != 1:
            raise FormatError("Expected a single unit term", symbol, expression.terms[1].pos)
        return cls.from_node(expression.terms[0], units)

    @classmethod
    def from_node(cls, node: TermNode, units: UnitRegistry) -> UnitTerm:
        unit, prefix = units.resolve(node.symbol)
        return cls(unit, prefix, node.exponent)

    # ── Derived properties ──────────────────────────────────────────────

    @property
    def prefix_multiplier(self) -> float:
        return 1.0 if self.prefix is None else float(self.prefix.multiplier)

    @property
    def multiplier(self) -> float:
        return self.prefix_multiplier ** self.exponent

    @property
    def dimension(self) -> str:
        return dimensions.apply_exponent(self.unit.dimension, self.exponent)

    @property
    def ascii_symbol(self) -> str:
        return self.format(ascii=True)

    @property
    def unicode_symbol(self) -> str:
        return self.format(ascii=False)

    @property
    def is_scalar(self) -> bool:
        return self.unit.is_scalar

    @property
    def is_expandable(self) -> bool:
        return self.unit.is_expandable

    @property
    def is_si(self) -> bool:
        return self.unit.is_si

    @property
    def is_base(self) -> bool:
        """True if the unit measures a single base axis (metre, pound, degree)."""
        return dimensions.is_base(self.unit.dimension)

    @property
    def is_si_base(self) -> bool:
        """True for the SI base unit of an axis, with its SI prefix (kg, m, s)."""
        if not self.is_base:
            return False
        return self.remove_exponent().ascii_symbol == dimensions.get_si_base_unit_symbol(self.unit.dimension)

    # ── Transformations ─────────────────────────────────────────────────

    def with_exponent(self, exponent: int) -> UnitTerm:
        return UnitTerm(self.unit, self.prefix, exponent)

    def inv(self) -> UnitTerm:
        return self.with_exponent(-self.exponent)

    def pow(self, n: int) -> UnitTerm:
        return self.with_exponent(self.exponent * n)

    def remove_prefix(self) -> UnitTerm:
        return UnitTerm(self.unit, None, self.exponent)

    def remove_exponent(self) -> UnitTerm:
        return UnitTerm(self.unit, self.prefix, 1)

    # ── Formatting and equality ─────────────────────────────────────────

    def format(self, ascii: bool = True, exponent: int | None = None) -> str:
        exp = self.exponent if exponent is None else exponent
        if ascii:
            prefix = self.prefix.ascii_symbol if self.prefix else ""
            suffix = "" if exp == 1 else str(exp)
        else:
            prefix = self.prefix.unicode_symbol if self.prefix else ""
            suffix = "" if exp == 1 else to_superscript(exp)
        return f"{prefix}{self.unit.format(ascii)}{suffix}"

    def same_base(self, other: UnitTerm) -> bool:
        """True when both terms share unit and prefix, whatever their exponents."""
        return self.unit.ascii_symbol == other.unit.ascii_symbol and _prefix_symbol(self) == _prefix_symbol(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitTerm):
            return NotImplemented
        return self.same_base(other) and self.exponent == other.exponent

    def __hash__(self) -> int:
        return hash((self.unit.ascii_symbol, _prefix_symbol(self), self.exponent))

    def __str__(self) -> str:
        return self.ascii_symbol


def _prefix_symbol(term: UnitTerm) -> str:
    return term.prefix.ascii_symbol if term.prefix else ""


def get_si_base_unit_term(letter: str, units: UnitRegistry) -> UnitTerm:
    """The SI base unit of one axis as a term, e.g. ``kg`` (gram with prefix kilo) for ``M``."""
    return UnitTerm.parse(dimensions.get_si_base_unit_symbol(letter), units)
