"""In-memory prefix lookup by symbol and group."""

from __future__ import annotations

import math

from unitgraph.core.errors import DomainError
from unitgraph.core.units.prefix import Prefix, PrefixGroup
from unitgraph.data.prefixes import build_prefixes


class PrefixRegistry:
    def __init__(self, prefixes: list[Prefix] | None = None):
        self._prefixes: list[Prefix] = []
        self._by_symbol: dict[str, Prefix] = {}
        for prefix in build_prefixes() if prefixes is None else prefixes:
            self.add(prefix)

    def add(self, prefix: Prefix) -> None:
        for symbol in prefix.symbols:
            if symbol in self._by_symbol:
                raise DomainError(f"Prefix symbol '{symbol}' is already registered.")
        self._prefixes.append(prefix)
        for symbol in prefix.symbols:
            self._by_symbol[symbol] = prefix

    def get_by_symbol(self, symbol: str) -> Prefix | None:
        return self._by_symbol.get(symbol)

    def get_by_group(self, group: PrefixGroup) -> list[Prefix]:
        return [p for p in self._prefixes if p.group & group]

    def engineering(self) -> list[Prefix]:
        return [p for p in self._prefixes if p.group & PrefixGroup.METRIC and p.is_engineering]

    def all(self) -> list[Prefix]:
        return list(self._prefixes)

    def longest_first(self) -> list[Prefix]:
        """Prefixes ordered so that 'da' is tried before 'd'."""
        return sorted(self._prefixes, key=lambda p: -max(len(s) for s in p.symbols))

    def invert(self, prefix: Prefix | None) -> Prefix | None:
        """The prefix with the reciprocal multiplier (kilo -> milli), or None if there is none."""
        if prefix is None:
            return None
        target = 1.0 / prefix.multiplier
        for candidate in self._prefixes:
            if math.isclose(candidate.multiplier, target, rel_tol=1e-9):
                return candidate
        return None
