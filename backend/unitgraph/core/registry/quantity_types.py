"""Named quantity types (length, force, ...) keyed by dimension code."""

from __future__ import annotations

from dataclasses import dataclass

from unitgraph.core import dimensions
from unitgraph.core.errors import DomainError
from unitgraph.data.quantity_types import QUANTITY_TYPES


@dataclass(frozen=True)
class QuantityType:
    name: str
    dimension: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "dimension", dimensions.normalize(self.dimension))


class QuantityTypeRegistry:
    def __init__(self, quantity_types: list[QuantityType] | None = None):
        self._by_dimension: dict[str, QuantityType] = {}
        if quantity_types is None:
            quantity_types = [QuantityType(qt["name"], qt["dimension"]) for qt in QUANTITY_TYPES]
        for quantity_type in quantity_types:
            self.add(quantity_type)

    def add(self, quantity_type: QuantityType) -> None:
        existing = self._by_dimension.get(quantity_type.dimension)
        if existing is not None and existing != quantity_type:
            raise DomainError(
                f"Dimension '{quantity_type.dimension}' already belongs to the quantity type '{existing.name}'."
            )
        self._by_dimension[quantity_type.dimension] = quantity_type

    def get_by_dimension(self, dimension: str) -> QuantityType | None:
        return self._by_dimension.get(dimensions.normalize(dimension))

    def get_by_name(self, name: str) -> QuantityType | None:
        for quantity_type in self._by_dimension.values():
            if quantity_type.name == name:
                return quantity_type
        return None

    def all(self) -> list[QuantityType]:
        return list(self._by_dimension.values())
