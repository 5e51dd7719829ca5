"""Registered conversion edges, grouped by dimension and loaded on first use."""

from __future__ import annotations

import logging

from unitgraph.core import dimensions
from unitgraph.core.conversion.conversion import Conversion
from unitgraph.core.conversion.value import ConversionValue
from unitgraph.core.errors import DomainError
from unitgraph.core.registry.units import UnitRegistry
from unitgraph.core.units.derived_unit import DerivedUnit
from unitgraph.data.quantity_types import QUANTITY_TYPES

logger = logging.getLogger(__name__)

EdgeKey = tuple[str, str]


class ConversionRegistry:
    """Edges between unprefixed symbols.

    Tabled conversions and the expansions of named derived units are loaded
    the first time a dimension is asked for. An edge given with prefixes is
    stored in its unprefixed form: ``in -> mm = 25.4`` becomes ``in -> m = 0.0254``.

    Edges added or removed by the caller are remembered apart from the tables,
    so they survive a ``reload()``. Edges naming a unit that is no longer
    registered are left out until the unit comes back.
    """

    def __init__(self, units: UnitRegistry):
        self.units = units
        self._edges: dict[str, dict[EdgeKey, Conversion]] = {}
        self._added: dict[str, dict[EdgeKey, Conversion]] = {}
        self._removed: dict[str, set[EdgeKey]] = {}
        self._loaded: set[str] = set()

    def add(self, src: str, dest: str, factor: float | ConversionValue) -> Conversion:
        src_unit = DerivedUnit.parse(src, self.units)
        dest_unit = DerivedUnit.parse(dest, self.units)
        if src_unit.dimension != dest_unit.dimension:
            raise DomainError(
                f"Cannot convert between '{src}' ({src_unit.dimension}) and '{dest}' ({dest_unit.dimension})."
            )
        if not isinstance(factor, ConversionValue):
            factor = ConversionValue(factor)
        if factor.value <= 0:
            raise DomainError(f"Conversion factor from '{src}' to '{dest}' must be positive.")

        dimension = src_unit.dimension
        edges = self._dimension_edges(dimension)
        conversion = self._unprefixed(dimension, src_unit, dest_unit, factor)
        key = (conversion.src, conversion.dest)
        self._added.setdefault(dimension, {})[key] = conversion
        self._removed.get(dimension, set()).discard(key)
        edges[key] = conversion
        return conversion

    def remove(self, src: str, dest: str) -> Conversion | None:
        src_unit = DerivedUnit.parse(src, self.units).remove_prefixes()
        dest_unit = DerivedUnit.parse(dest, self.units).remove_prefixes()
        dimension = src_unit.dimension
        key = (src_unit.ascii_symbol, dest_unit.ascii_symbol)
        edges = self._dimension_edges(dimension)
        self._added.get(dimension, {}).pop(key, None)
        self._removed.setdefault(dimension, set()).add(key)
        return edges.pop(key, None)

    def get(self, dimension: str, src: str, dest: str) -> Conversion | None:
        return self._dimension_edges(dimension).get((src, dest))

    def get_by_dimension(self, dimension: str) -> list[Conversion]:
        return list(self._dimension_edges(dimension).values())

    def reload(self) -> None:
        """Rebuild every dimension on next access, e.g. after units were added or removed."""
        self._loaded.clear()

    # ── Internals ───────────────────────────────────────────────────────

    def _dimension_edges(self, dimension: str) -> dict[EdgeKey, Conversion]:
        dimension = dimensions.normalize(dimension)
        self._ensure_loaded(dimension)
        return self._edges[dimension]

    def _unprefixed(self, dimension: str, src: DerivedUnit, dest: DerivedUnit, factor: ConversionValue) -> Conversion:
        if src.has_prefixes or dest.has_prefixes:
            factor = factor * ConversionValue.exact(dest.multiplier) / ConversionValue.exact(src.multiplier)
            src, dest = src.remove_prefixes(), dest.remove_prefixes()
        return Conversion(dimension, src.ascii_symbol, dest.ascii_symbol, factor)

    def _ensure_loaded(self, dimension: str) -> None:
        """Build the edges of ``dimension``. Nothing is kept if a table row is malformed."""
        if dimension in self._loaded:
            return

        edges: dict[EdgeKey, Conversion] = {}
        for quantity_type in QUANTITY_TYPES:
            if dimensions.normalize(quantity_type["dimension"]) != dimension:
                continue
            for src, dest, factor in quantity_type["conversions"]:
                self._load_edge(edges, dimension, src, dest, factor)

        for unit in self.units.get_by_dimension(dimension):
            if unit.is_expandable:
                self._load_edge(edges, dimension, unit.ascii_symbol, unit.expansion_symbol, unit.expansion_multiplier)

        for key in self._removed.get(dimension, ()):
            edges.pop(key, None)
        for key, conversion in self._added.get(dimension, {}).items():
            if self._is_registered(conversion):
                edges[key] = conversion
            else:
                logger.debug("Leaving out %s: one of its units is not registered", conversion)

        self._edges[dimension] = edges
        self._loaded.add(dimension)
        logger.debug("Loaded %d conversions for dimension %s", len(edges), dimension)

    def _load_edge(self, edges: dict[EdgeKey, Conversion], dimension: str, src: str, dest: str, factor: float) -> None:
        """Add a tabled edge unless one of its units is not registered. FormatError propagates."""
        try:
            src_unit = DerivedUnit.parse(src, self.units)
            dest_unit = DerivedUnit.parse(dest, self.units)
        except DomainError as exc:
            logger.debug("Skipping conversion %r -> %r: %s", src, dest, exc)
            return
        conversion = self._unprefixed(dimension, src_unit, dest_unit, ConversionValue(factor))
        edges[(conversion.src, conversion.dest)] = conversion

    def _is_registered(self, conversion: Conversion) -> bool:
        try:
            DerivedUnit.parse(conversion.src, self.units)
            DerivedUnit.parse(conversion.dest, self.units)
        except DomainError:
            return False
        return True
