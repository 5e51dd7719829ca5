"""Unit prefixes (kilo, milli, kibi, ...) and the group flags that control which units take them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntFlag


class PrefixGroup(IntFlag):
    NONE = 0
    SMALL_METRIC = 1             # quecto .. deci
    LARGE_METRIC = 2             # deca .. quetta
    METRIC = 3
    BINARY = 4                   # kibi .. yobi
    LARGE = 6                    # large metric + binary
    ALL = 7
    SMALL_ENGINEERING = 8        # milli, micro, nano, ... (powers of 1000)
    LARGE_ENGINEERING = 16       # kilo, mega, giga, ...
    ENGINEERING = 24


@dataclass(frozen=True)
class Prefix:
    name: str
    ascii_symbol: str
    multiplier: float
    group: PrefixGroup
    unicode_symbol: str = ""

    def __post_init__(self) -> None:
        if not self.unicode_symbol:
            object.__setattr__(self, "unicode_symbol", self.ascii_symbol)
        if self.multiplier <= 0 or self.multiplier == 1:
            raise ValueError(f"Prefix multiplier must be positive and not 1, got {self.multiplier}")

    @property
    def is_engineering(self) -> bool:
        return math.isclose(math.log(self.multiplier, 1000), round(math.log(self.multiplier, 1000)))

    @property
    def symbols(self) -> tuple[str, ...]:
        if self.unicode_symbol == self.ascii_symbol:
            return (self.ascii_symbol,)
        return (self.ascii_symbol, self.unicode_symbol)

    def __str__(self) -> str:
        return self.ascii_symbol
