"""AST node definitions for compound unit expressions."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TermNode:
    """One ``[prefix]symbol[exponent]`` term with the sign of any division already applied."""

    symbol: str
    exponent: int = 1
    pos: int = 0


@dataclass
class UnitExpression:
    terms: list[TermNode] = field(default_factory=list)
    source: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.terms
