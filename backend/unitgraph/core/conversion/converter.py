"""Per-dimension conversion graph.

Nodes are the unprefixed symbols of one dimension; edges are the registered
conversions between them. A path between two nodes is looked up in this order:

1. identical symbols (factor 1, exact);
2. a direct edge, or the reciprocal of the reverse edge;
3. a two-hop composition through another node, trying the chain, divergent,
   convergent and opposite patterns for each node in turn. The first exact
   candidate is returned, otherwise the first candidate found;
4. growing the graph from the source: every node reachable by steps 2-3 is
   stored as a learned edge, and the search repeats until the target is
   reached or a round learns nothing.

Compound and prefixed units are merged, stripped of their prefixes and looked
up as nodes; when that fails both sides are reduced to SI base units.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from unitgraph.core import dimensions
from unitgraph.core.conversion.conversion import Conversion
from unitgraph.core.conversion.value import ConversionValue
from unitgraph.core.errors import DomainError, NoConversionPathError
from unitgraph.core.units.derived_unit import DerivedUnit, UnitLike

if TYPE_CHECKING:
    from unitgraph.core.context import UnitContext
    from unitgraph.core.registry.quantity_types import QuantityType

logger = logging.getLogger(__name__)


class Converter:
    """Finds conversion factors between units of a single dimension."""

    def __init__(self, dimension: str, context: UnitContext):
        self.dimension = dimensions.normalize(dimension)
        self.context = context
        self._edges: dict[tuple[str, str], Conversion] | None = None
        self._nodes: list[str] = []
        self._paths: dict[tuple[str, str], Conversion | None] = {}
        self._results: dict[tuple[str, str], Conversion | None] = {}

    # ── Shared instances ────────────────────────────────────────────────

    @classmethod
    def get_by_dimension(cls, dimension: str) -> Converter:
        """The converter for ``dimension`` in the default context."""
        from unitgraph.core.context import default_context

        return default_context().converter(dimension)

    @classmethod
    def clear(cls) -> None:
        """Drop every converter of the default context along with its cached results."""
        from unitgraph.core.context import default_context

        default_context().invalidate()

    # ── Graph ───────────────────────────────────────────────────────────

    @property
    def quantity_type(self) -> QuantityType | None:
        return self.context.quantity_types.get_by_dimension(self.dimension)

    @property
    def nodes(self) -> list[str]:
        self._load()
        return list(self._nodes)

    @property
    def edges(self) -> list[Conversion]:
        self._load()
        return list(self._edges.values())

    def _load(self) -> None:
        if self._edges is not None:
            return
        conversions = self.context.conversions.get_by_dimension(self.dimension)
        self._edges = {(c.src, c.dest): c for c in conversions}
        unit_symbols = [u.ascii_symbol for u in self.context.units.get_by_dimension(self.dimension)]
        edge_symbols = [symbol for pair in self._edges for symbol in pair]
        self._nodes = list(dict.fromkeys(unit_symbols + edge_symbols))
        logger.debug(
            "Converter %s: %d nodes, %d edges", self.dimension, len(self._nodes), len(self._edges)
        )

    # ── Public API ──────────────────────────────────────────────────────

    def validate_unit(self, unit: UnitLike) -> DerivedUnit:
        """Parse ``unit`` and check it belongs to this converter's dimension."""
        derived = DerivedUnit.from_value(unit, self.context.units)
        if derived.dimension == self.dimension:
            return derived

        quantity_type = self.quantity_type
        if quantity_type is not None:
            raise DomainError(f"The unit '{derived.ascii_symbol}' is invalid for {quantity_type.name} quantities.")
        raise DomainError(
            f"The unit '{derived.ascii_symbol}' with dimension '{derived.dimension}' "
            f"does not match the converter dimension '{self.dimension}'."
        )

    def get_conversion(self, src: UnitLike, dest: UnitLike) -> Conversion | None:
        """Conversion from ``src`` to ``dest`` with its relative error, or None if no path exists."""
        src_unit = self.validate_unit(src)
        dest_unit = self.validate_unit(dest)
        key = (src_unit.ascii_symbol, dest_unit.ascii_symbol)
        if key not in self._results:
            self._results[key] = self._compute(src_unit, dest_unit)
        return self._results[key]

    def get_conversion_factor(self, src: UnitLike, dest: UnitLike) -> float | None:
        conversion = self.get_conversion(src, dest)
        return None if conversion is None else conversion.value

    def convert(self, value: float, src: UnitLike, dest: UnitLike) -> float:
        conversion = self.get_conversion(src, dest)
        if conversion is None:
            raise NoConversionPathError(
                self.validate_unit(src).ascii_symbol, self.validate_unit(dest).ascii_symbol
            )
        return value * conversion.value

    def find_path(self, src: str, dest: str) -> Conversion | None:
        """Resolve two unprefixed node symbols through the graph. Results are cached."""
        key = (src, dest)
        if key in self._paths:
            return self._paths[key]

        self._load()
        conversion = self._find(src, dest)
        if conversion is None:
            conversion = self._grow(src, dest)
        if conversion is None:
            logger.debug("Converter %s: no path from '%s' to '%s'", self.dimension, src, dest)
        self._paths[key] = conversion
        return conversion

    # ── Resolution ──────────────────────────────────────────────────────

    def _compute(self, src: DerivedUnit, dest: DerivedUnit) -> Conversion | None:
        src_factor, src_merged = self.context.merge_factor(src)
        dest_factor, dest_merged = self.context.merge_factor(dest)
        factor = src_factor / dest_factor
        if src_merged != dest_merged:
            factor = factor * ConversionValue.exact(src_merged.multiplier) / ConversionValue.exact(dest_merged.multiplier)
            src_base, dest_base = src_merged.remove_prefixes(), dest_merged.remove_prefixes()
            path = self.find_path(src_base.ascii_symbol, dest_base.ascii_symbol)
            if path is not None:
                factor = factor * path.factor
            else:
                via_base = self._via_base(src_base, dest_base)
                if via_base is None:
                    return None
                factor = factor * via_base
        return Conversion(self.dimension, src.ascii_symbol, dest.ascii_symbol, factor)

    def _via_base(self, src: DerivedUnit, dest: DerivedUnit) -> ConversionValue | None:
        src_factor = self.context.to_base(src)
        dest_factor = self.context.to_base(dest)
        if src_factor is None or dest_factor is None:
            return None
        return src_factor / dest_factor

    def _find(self, src: str, dest: str) -> Conversion | None:
        if src == dest:
            return Conversion(self.dimension, src, dest, ConversionValue.exact(1))

        direct = self._edges.get((src, dest))
        if direct is not None:
            return direct
        reverse = self._edges.get((dest, src))
        if reverse is not None:
            return reverse.invert()

        found: Conversion | None = None
        for mid in self._nodes:
            if mid == src or mid == dest:
                continue
            for candidate in self._two_hop(src, mid, dest):
                if candidate.factor.is_exact:
                    return candidate
                if found is None:
                    found = candidate
        return found

    def _two_hop(self, src: str, mid: str, dest: str) -> Iterator[Conversion]:
        edges = self._edges
        src_mid, mid_src = edges.get((src, mid)), edges.get((mid, src))
        mid_dest, dest_mid = edges.get((mid, dest)), edges.get((dest, mid))
        if src_mid and mid_dest:
            yield src_mid.combine_sequential(mid_dest)
        if mid_src and mid_dest:
            yield mid_src.combine_divergent(mid_dest)
        if src_mid and dest_mid:
            yield src_mid.combine_convergent(dest_mid)
        if mid_src and dest_mid:
            yield mid_src.combine_opposite(dest_mid)

    def _grow(self, src: str, dest: str) -> Conversion | None:
        if src not in self._nodes or dest not in self._nodes:
            return None

        rounds = 0
        while True:
            rounds += 1
            learned = 0
            for node in self._nodes:
                if node == src or (src, node) in self._edges:
                    continue
                conversion = self._find(src, node)
                if conversion is None:
                    continue
                self._edges[(src, node)] = conversion
                learned += 1
                if node == dest:
                    logger.debug(
                        "Converter %s: reached '%s' from '%s' after %d rounds",
                        self.dimension, dest, src, rounds,
                    )
                    return conversion
            if not learned:
                return None

    def __repr__(self) -> str:
        return f"Converter('{self.dimension}')"
