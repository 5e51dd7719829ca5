"""Compound units: ordered products of unit terms, e.g. ``kg*m/s2`` or ``J/(mol*K)``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, Union

from unitgraph.core import dimensions
from unitgraph.core.parser.parser import parse_expression
from unitgraph.core.units.unit import Unit
from unitgraph.core.units.unit_term import UnitTerm

if TYPE_CHECKING:
    from unitgraph.core.registry.units import UnitRegistry

UnitLike = Union[str, Unit, UnitTerm, "DerivedUnit"]


class DerivedUnit:
    """An immutable product of unit terms.

    Terms sharing a unit and prefix are combined when the unit is built, and
    terms whose exponents cancel out are dropped, so ``m*m`` is ``m2`` and
    ``m/m`` is dimensionless. Otherwise the order of the terms is kept.
    """

    def __init__(self, terms: Iterable[UnitTerm] = ()):
        exponents: dict[tuple[str, str], int] = {}
        heads: dict[tuple[str, str], UnitTerm] = {}
        for term in terms:
            if term.is_scalar:
                continue
            key = (term.unit.ascii_symbol, term.prefix.ascii_symbol if term.prefix else "")
            heads.setdefault(key, term)
            exponents[key] = exponents.get(key, 0) + term.exponent
        self._terms: tuple[UnitTerm, ...] = tuple(
            heads[key].with_exponent(exp) for key, exp in exponents.items() if exp != 0
        )

    # ── Construction ────────────────────────────────────────────────────

    @classmethod
    def parse(cls, symbol: str, units: UnitRegistry) -> DerivedUnit:
        """Parse a compound symbol. Raises FormatError for bad syntax, DomainError for unknown units."""
        expression = parse_expression(symbol)
        return cls(UnitTerm.from_node(node, units) for node in expression.terms)

    @classmethod
    def from_value(cls, value: UnitLike, units: UnitRegistry) -> DerivedUnit:
        if isinstance(value, DerivedUnit):
            return value
        if isinstance(value, UnitTerm):
            return cls([value])
        if isinstance(value, Unit):
            return cls([UnitTerm(value)])
        return cls.parse(value, units)

    # ── Properties ──────────────────────────────────────────────────────

    @property
    def terms(self) -> tuple[UnitTerm, ...]:
        return self._terms

    @property
    def dimension(self) -> str:
        vector: dict[str, int] = {}
        for term in self._terms:
            for letter, exp in dimensions.decompose(term.dimension).items():
                vector[letter] = vector.get(letter, 0) + exp
        return dimensions.compose(vector)

    @property
    def multiplier(self) -> float:
        """Product of the prefix multipliers raised to their exponents."""
        result = 1.0
        for term in self._terms:
            result *= term.multiplier
        return result

    @property
    def ascii_symbol(self) -> str:
        return self.format(ascii=True)

    @property
    def unicode_symbol(self) -> str:
        return self.format(ascii=False)

    @property
    def is_dimensionless(self) -> bool:
        return self.dimension == dimensions.DIMENSIONLESS

    @property
    def is_si(self) -> bool:
        return all(term.is_si for term in self._terms)

    @property
    def has_prefixes(self) -> bool:
        return any(term.prefix is not None for term in self._terms)

    # ── Algebra ─────────────────────────────────────────────────────────

    def mul(self, other: DerivedUnit | UnitTerm) -> DerivedUnit:
        other_terms = (other,) if isinstance(other, UnitTerm) else other.terms
        return DerivedUnit(self._terms + tuple(other_terms))

    def div(self, other: DerivedUnit | UnitTerm) -> DerivedUnit:
        return self.mul(other.inv())

    def inv(self) -> DerivedUnit:
        return DerivedUnit(term.inv() for term in self._terms)

    def pow(self, n: int) -> DerivedUnit:
        if n == 0:
            return DerivedUnit()
        return DerivedUnit(term.pow(n) for term in self._terms)

    def remove_prefixes(self) -> DerivedUnit:
        return DerivedUnit(term.remove_prefix() for term in self._terms)

    # ── Formatting ──────────────────────────────────────────────────────

    def format(self, ascii: bool = True) -> str:
        """Canonical symbol: numerator terms, then ``/`` and the denominator.

        Several denominator terms are wrapped in parentheses. A unit with no
        positive terms keeps its negative exponents (``s-1``).
        """
        sep = "*" if ascii else "·"
        positive = [t for t in self._terms if t.exponent > 0]
        negative = [t for t in self._terms if t.exponent < 0]
        if not positive:
            return sep.join(t.format(ascii) for t in negative)

        result = sep.join(t.format(ascii) for t in positive)
        if negative:
            denominator = sep.join(t.format(ascii, exponent=-t.exponent) for t in negative)
            result += "/" + (denominator if len(negative) == 1 else f"({denominator})")
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DerivedUnit):
            return NotImplemented
        return self.ascii_symbol == other.ascii_symbol and self.dimension == other.dimension

    def __hash__(self) -> int:
        return hash((self.ascii_symbol, self.dimension))

    def __iter__(self) -> Iterator[UnitTerm]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __str__(self) -> str:
        return self.ascii_symbol

    def __repr__(self) -> str:
        return f"DerivedUnit('{self.ascii_symbol}')"
