"""UnitContext: the registries plus one lazily built Converter per dimension.

A context is owned by whoever needs conversions (the API keeps one for the
process, tests build their own). Any change to the registries made through the
context invalidates its converters, so stale cached paths are never served.
"""

from __future__ import annotations

import logging
from typing import Iterable

from unitgraph.core import dimensions
from unitgraph.core.conversion.conversion import Conversion
from unitgraph.core.conversion.converter import Converter
from unitgraph.core.conversion.value import ConversionValue
from unitgraph.core.registry.conversions import ConversionRegistry
from unitgraph.core.registry.prefixes import PrefixRegistry
from unitgraph.core.registry.quantity_types import QuantityTypeRegistry
from unitgraph.core.registry.units import UnitRegistry
from unitgraph.core.units.derived_unit import DerivedUnit, UnitLike
from unitgraph.core.units.unit import System, Unit
from unitgraph.core.units.unit_term import UnitTerm, get_si_base_unit_term

logger = logging.getLogger(__name__)


class UnitContext:
    def __init__(self, systems: Iterable[System] | None = None):
        self.prefixes = PrefixRegistry()
        self.units = UnitRegistry(self.prefixes)
        self.quantity_types = QuantityTypeRegistry()
        self.conversions = ConversionRegistry(self.units)
        self._converters: dict[str, Converter] = {}
        self._base_factors: dict[tuple[str, bool], ConversionValue | None] = {}

        for system in System if systems is None else systems:
            self.units.load_system(system)
        logger.info(
            "Unit context ready: %d units from %d systems",
            len(self.units), len(self.units.loaded_systems),
        )

    @classmethod
    def from_system_names(cls, names: Iterable[str]) -> UnitContext:
        """Build a context from enum names such as ``["SI", "US"]``."""
        return cls(System[name.strip().upper()] for name in names)

    # ── Converters ──────────────────────────────────────────────────────

    def converter(self, dimension: str) -> Converter:
        """The single Converter of ``dimension``, created on first request."""
        dimension = dimensions.normalize(dimension)
        converter = self._converters.get(dimension)
        if converter is None:
            converter = Converter(dimension, self)
            self._converters[dimension] = converter
            logger.debug("Created converter for dimension %s", dimension)
        return converter

    get_by_dimension = converter

    def invalidate(self) -> None:
        """Drop every converter and memoized result."""
        if self._converters:
            logger.info("Invalidating %d converters", len(self._converters))
        self._converters.clear()
        self._base_factors.clear()

    clear = invalidate

    # ── Registry changes ────────────────────────────────────────────────

    def load_system(self, system: System) -> int:
        added = self.units.load_system(system)
        self.conversions.reload()
        self.invalidate()
        return added

    def add_unit(self, unit: Unit) -> None:
        self.units.add(unit)
        self.conversions.reload()
        self.invalidate()

    def remove_unit(self, symbol: str) -> Unit | None:
        unit = self.units.remove(symbol)
        self.conversions.reload()
        self.invalidate()
        return unit

    def add_conversion(self, src: str, dest: str, factor: float | ConversionValue) -> Conversion:
        conversion = self.conversions.add(src, dest, factor)
        self.invalidate()
        return conversion

    def remove_conversion(self, src: str, dest: str) -> Conversion | None:
        conversion = self.conversions.remove(src, dest)
        self.invalidate()
        return conversion

    # ── Conversion entry points ─────────────────────────────────────────

    def parse_unit(self, unit: UnitLike) -> DerivedUnit:
        return DerivedUnit.from_value(unit, self.units)

    def get_conversion(self, src: UnitLike, dest: UnitLike) -> Conversion | None:
        src_unit = self.parse_unit(src)
        return self.converter(src_unit.dimension).get_conversion(src_unit, dest)

    def get_conversion_factor(self, src: UnitLike, dest: UnitLike) -> float | None:
        conversion = self.get_conversion(src, dest)
        return None if conversion is None else conversion.value

    def convert(self, value: float, src: UnitLike, dest: UnitLike) -> float:
        src_unit = self.parse_unit(src)
        return self.converter(src_unit.dimension).convert(value, src_unit, dest)

    # ── Expand and merge ────────────────────────────────────────────────

    def expand(self, value: float, unit: UnitLike) -> tuple[float, DerivedUnit]:
        """Replace named derived units by their expansion (one level), then merge.

        ``expand(1, "kN")`` gives ``(1000.0, kg*m/s2)``.
        """
        derived = self.parse_unit(unit)
        terms: list[UnitTerm] = []
        for term in derived:
            if not term.is_expandable:
                terms.append(term)
                continue
            expansion = DerivedUnit.parse(term.unit.expansion_symbol, self.units).pow(term.exponent)
            value *= (term.unit.expansion_multiplier * term.prefix_multiplier) ** term.exponent
            terms.extend(expansion.terms)
        return self.merge(value, DerivedUnit(terms))

    def merge(self, value: float, unit: UnitLike) -> tuple[float, DerivedUnit]:
        """Combine terms of the same dimension into the first such term.

        ``merge(1, "m*ft")`` gives ``(0.3048, m2)``.
        """
        factor, merged = self.merge_factor(self.parse_unit(unit))
        return value * factor.value, merged

    def merge_factor(self, unit: DerivedUnit) -> tuple[ConversionValue, DerivedUnit]:
        factor = ConversionValue.exact(1)
        groups: list[list] = []  # [head term, summed exponent]
        for term in unit:
            for group in groups:
                head = group[0]
                if head.unit.dimension != term.unit.dimension:
                    continue
                conversion = self.converter(term.unit.dimension).get_conversion(
                    term.remove_exponent(), head.remove_exponent()
                )
                if conversion is None:
                    continue
                factor = factor * conversion.factor ** term.exponent
                group[1] += term.exponent
                break
            else:
                groups.append([term, term.exponent])

        terms = [head.with_exponent(exp) for head, exp in groups if exp != 0]
        return factor, DerivedUnit(terms)

    # ── Reduction to SI base units ──────────────────────────────────────

    def si_unit(self, dimension: str) -> DerivedUnit:
        """Product of SI base units with the given dimension, e.g. ``kg*m/s2`` for ``MLT-2``."""
        return DerivedUnit(
            get_si_base_unit_term(letter, self.units).with_exponent(exp)
            for letter, exp in dimensions.decompose(dimension).items()
            if exp != 0
        )

    def to_base(self, unit: DerivedUnit, bridge: bool = True) -> ConversionValue | None:
        """Factor converting ``unit`` into the matching product of SI base units."""
        result = ConversionValue.exact(1)
        for term in unit:
            factor = self.unit_to_base(term.unit, bridge)
            if factor is None:
                return None
            result = result * (ConversionValue.exact(term.prefix_multiplier) * factor) ** term.exponent
        return result

    def unit_to_base(self, unit: Unit, bridge: bool = True) -> ConversionValue | None:
        key = (unit.ascii_symbol, bridge)
        if key not in self._base_factors:
            self._base_factors[key] = self._unit_to_base(unit, bridge)
        return self._base_factors[key]

    def _unit_to_base(self, unit: Unit, bridge: bool) -> ConversionValue | None:
        if dimensions.is_base(unit.dimension):
            if dimensions.AXES[unit.dimension].si_base not in self.units:
                return None
            si_term = get_si_base_unit_term(unit.dimension, self.units)
            path = self.converter(unit.dimension).find_path(unit.ascii_symbol, si_term.unit.ascii_symbol)
            return None if path is None else path.factor / ConversionValue.exact(si_term.multiplier)

        if unit.is_expandable:
            base = self.to_base(DerivedUnit.parse(unit.expansion_symbol, self.units), bridge)
            return None if base is None else ConversionValue(unit.expansion_multiplier) * base

        if not bridge:
            return None
        # Bridge through a node of the same dimension that reduces without bridging (L -> m3).
        converter = self.converter(unit.dimension)
        for node in converter.nodes:
            if node == unit.ascii_symbol:
                continue
            node_unit = DerivedUnit.parse(node, self.units)
            if not all(dimensions.is_base(t.unit.dimension) or t.is_expandable for t in node_unit):
                continue
            path = converter.find_path(unit.ascii_symbol, node)
            if path is None:
                continue
            base = self.to_base(node_unit, bridge=False)
            if base is not None:
                return path.factor * base
        return None


_default: UnitContext | None = None


def default_context() -> UnitContext:
    """Process-wide context with every measurement system loaded, built on first use."""
    global _default
    if _default is None:
        _default = UnitContext()
    return _default


def convert(value: float, src: UnitLike, dest: UnitLike) -> float:
    """Convert with the default context. Raises NoConversionPathError when no path exists."""
    return default_context().convert(value, src, dest)
