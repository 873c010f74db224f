"""Seed catalog for the in-memory product repository."""

from typing import List, Tuple

from src.shopping.models import Product, Unit

# (id, name, category, available units)
DEFAULT_CATALOG: Tuple[Tuple[int, str, str, Tuple[Unit, ...]], ...] = (
    (1, "Mleko", "nabiał", (Unit.LITER, Unit.MILLILITER)),
    (2, "Ser żółty", "nabiał", (Unit.KILOGRAM, Unit.GRAM)),
    (3, "Jogurt naturalny", "nabiał", (Unit.PIECE, Unit.GRAM)),
    (4, "Pomidor", "warzywa", (Unit.PIECE, Unit.KILOGRAM)),
    (5, "Ogórek", "warzywa", (Unit.PIECE, Unit.KILOGRAM)),
    (6, "Chleb", "pieczywo", (Unit.PIECE,)),
)


def build_default_catalog() -> List[Product]:
    """Create fresh ``Product`` objects for the seeded catalog.

    Every call returns new instances, so usage counters are never shared
    between repositories.
    """
    return [
        Product(id=product_id, name=name, category=category, available_units=list(units))
        for product_id, name, category, units in DEFAULT_CATALOG
    ]
