"""Named units and the measurement systems they belong to."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from unitgraph.core import dimensions
from unitgraph.core.units.prefix import Prefix, PrefixGroup


class System(Enum):
    SI = "SI"
    SI_ACCEPTED = "SI accepted"
    COMMON = "common"
    IMPERIAL = "imperial"
    US = "US customary"
    SCIENTIFIC = "scientific"
    ASTRONOMICAL = "astronomical"
    NAUTICAL = "nautical"
    TYPOGRAPHY = "typography"


@dataclass(frozen=True)
class Unit:
    """An unprefixed unit such as metre, pound or newton."""

    name: str
    ascii_symbol: str
    dimension: str
    unicode_symbol: str = ""
    alternate_symbol: str | None = None
    prefix_group: PrefixGroup = PrefixGroup.NONE
    systems: frozenset[System] = field(default_factory=frozenset)
    expansion_symbol: str | None = None
    expansion_multiplier: float = 1.0
    quantity_type: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "dimension", dimensions.normalize(self.dimension))
        object.__setattr__(self, "systems", frozenset(self.systems))
        if not self.unicode_symbol:
            object.__setattr__(self, "unicode_symbol", self.ascii_symbol)
        if self.expansion_multiplier <= 0:
            raise ValueError(f"Expansion multiplier for '{self.name}' must be positive")

    @property
    def symbols(self) -> tuple[str, ...]:
        """All distinct symbols the unit answers to, ASCII first."""
        candidates = (self.ascii_symbol, self.unicode_symbol, self.alternate_symbol)
        return tuple(dict.fromkeys(s for s in candidates if s is not None))

    @property
    def is_expandable(self) -> bool:
        return self.expansion_symbol is not None

    @property
    def is_scalar(self) -> bool:
        return self.ascii_symbol == ""

    @property
    def is_si(self) -> bool:
        return System.SI in self.systems

    def accepts_prefix(self, prefix: Prefix) -> bool:
        return bool(self.prefix_group & prefix.group)

    def format(self, ascii: bool = True) -> str:
        return self.ascii_symbol if ascii else self.unicode_symbol

    def __str__(self) -> str:
        return self.ascii_symbol
