"""In-memory unit registry with prefix-aware symbol resolution."""

from __future__ import annotations

import logging

from unitgraph.core import dimensions
from unitgraph.core.errors import DomainError
from unitgraph.core.registry.prefixes import PrefixRegistry
from unitgraph.core.units.prefix import Prefix
from unitgraph.core.units.unit import System, Unit
from unitgraph.data.quantity_types import QUANTITY_TYPES

logger = logging.getLogger(__name__)


def unit_from_definition(definition: dict, quantity_type: dict) -> Unit:
    """Build a Unit from a row of the quantity type tables."""
    return Unit(
        dimension=definition.get("dimension", quantity_type["dimension"]),
        quantity_type=quantity_type["name"],
        **{k: v for k, v in definition.items() if k != "dimension"},
    )


class UnitRegistry:
    """Units keyed by every symbol they answer to, kept in registration order."""

    def __init__(self, prefixes: PrefixRegistry | None = None):
        self.prefixes = prefixes if prefixes is not None else PrefixRegistry()
        self._units: dict[str, Unit] = {}        # ascii symbol -> unit
        self._by_symbol: dict[str, Unit] = {}    # ascii/unicode/alternate -> unit
        self._loaded_systems: set[System] = set()

    # ── Mutation ────────────────────────────────────────────────────────

    def add(self, unit: Unit) -> None:
        for symbol in unit.symbols:
            existing = self._by_symbol.get(symbol)
            if existing is not None and existing != unit:
                raise DomainError(
                    f"The symbol '{symbol}' of {unit.name} is already used by {existing.name}."
                )
        self._units[unit.ascii_symbol] = unit
        for symbol in unit.symbols:
            self._by_symbol[symbol] = unit

    def remove(self, symbol: str) -> Unit | None:
        unit = self._by_symbol.get(symbol)
        if unit is None:
            return None
        del self._units[unit.ascii_symbol]
        for s in unit.symbols:
            self._by_symbol.pop(s, None)
        return unit

    def load_system(self, system: System) -> int:
        """Register every tabled unit belonging to ``system``. Returns the number added."""
        added = 0
        for quantity_type in QUANTITY_TYPES:
            for definition in quantity_type["units"]:
                if system not in definition.get("systems", ()):
                    continue
                if definition["ascii_symbol"] in self._units:
                    continue
                self.add(unit_from_definition(definition, quantity_type))
                added += 1
        self._loaded_systems.add(system)
        logger.debug("Loaded %d units for the %s system", added, system.value)
        return added

    @property
    def loaded_systems(self) -> frozenset[System]:
        return frozenset(self._loaded_systems)

    # ── Lookup ──────────────────────────────────────────────────────────

    def get_by_symbol(self, symbol: str) -> Unit | None:
        """Exact, unprefixed lookup against ASCII, Unicode and alternate symbols."""
        return self._by_symbol.get(symbol)

    def get_by_name(self, name: str) -> Unit | None:
        for unit in self._units.values():
            if unit.name == name:
                return unit
        return None

    def get_by_dimension(self, dimension: str) -> list[Unit]:
        dimension = dimensions.normalize(dimension)
        return [u for u in self._units.values() if u.dimension == dimension]

    def all(self) -> list[Unit]:
        return list(self._units.values())

    def symbols(self) -> list[str]:
        return list(self._units)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._by_symbol

    def __len__(self) -> int:
        return len(self._units)

    def resolve(self, symbol: str) -> tuple[Unit, Prefix | None]:
        """Find the unit and prefix a (possibly prefixed) symbol refers to.

        Exact symbols win over prefixed readings, so ``min`` is a minute and
        not a milli-inch. Alternate symbols never take a prefix.
        """
        unit = self.get_by_symbol(symbol)
        if unit is not None:
            return unit, None

        rejected: tuple[Unit, Prefix] | None = None
        for prefix in self.prefixes.longest_first():
            for prefix_symbol in prefix.symbols:
                if not symbol.startswith(prefix_symbol) or len(symbol) == len(prefix_symbol):
                    continue
                rest = symbol[len(prefix_symbol):]
                unit = self.get_by_symbol(rest)
                if unit is None or rest not in (unit.ascii_symbol, unit.unicode_symbol):
                    continue
                if unit.accepts_prefix(prefix):
                    return unit, prefix
                rejected = rejected or (unit, prefix)

        if rejected is not None:
            unit, prefix = rejected
            raise DomainError(f"The unit '{unit.ascii_symbol}' does not accept the prefix '{prefix.ascii_symbol}'.")
        raise DomainError(f"Unknown unit '{symbol}'.")
