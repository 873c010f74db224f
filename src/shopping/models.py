"""Domain records for the shopping-list service."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class Unit(str, Enum):
    """Measurement unit a product can be bought in.

    Values are the wire representation used in request and response bodies.
    """

    PIECE = "szt."
    KILOGRAM = "kg"
    GRAM = "g"
    LITER = "l"
    MILLILITER = "ml"

    def __str__(self) -> str:
        return self.value


@dataclass
class Product:
    """Catalog entry.

    ``usage_count`` is bumped in place by the shopping service, so callers
    must hold on to the repository's own instance rather than a copy.
    """

    id: int
    name: str
    category: str
    available_units: List[Unit] = field(default_factory=list)
    usage_count: int = 0

    def supports_unit(self, unit: str) -> bool:
        return unit in self.available_units


@dataclass(frozen=True)
class ShoppingItem:
    """Single entry on the shopping list."""

    product_id: int
    unit: Unit
    quantity: float = 1.0
