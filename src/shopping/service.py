"""Shopping service module.

Validates additions to the shopping list and keeps product usage counts in
step with them.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from src.api.exceptions import InvalidUnitError
from src.shopping.models import Product, ShoppingItem, Unit
from src.shopping.repository import ProductRepository

# Configure module logger
logger = logging.getLogger(__name__)

# Every addition is recorded with this quantity
DEFAULT_QUANTITY = 1.0


class ShoppingService:
    """Coordinates the product repository with the shopping list.

    The repository may be shared with other services. The shopping list is
    owned by this instance and only ever grows.
    """

    def __init__(
        self,
        repository: ProductRepository,
        shopping_list: Optional[Iterable[ShoppingItem]] = None,
    ):
        self.repository = repository
        self._items: List[ShoppingItem] = list(shopping_list or [])
        # Shared with every service on this repository; guards list appends and
        # usage count increments together
        self._lock = repository.usage_lock

    @property
    def shopping_list(self) -> Tuple[ShoppingItem, ...]:
        """Snapshot of the items added so far, in insertion order."""
        with self._lock:
            return tuple(self._items)

    def add_product_to_list(self, product_id: int, unit: str) -> Product:
        """Add a product to the shopping list.

        The item is always recorded with a quantity of 1, whatever the caller
        asked for.

        Args:
            product_id: ID of the catalog product to add.
            unit: Unit to record. Must be one of the product's available units.

        Returns:
            The repository's product, with its usage count already increased.

        Raises:
            ProductNotFoundError: If the product ID is unknown.
            InvalidUnitError: If the product is not sold in ``unit``.
        """
        with self._lock:
            product = self.repository.find_by_id(product_id)

            if not product.supports_unit(unit):
                logger.warning(
                    "Rejected shopping list addition",
                    extra={"product_id": product_id, "unit": str(unit)},
                )
                raise InvalidUnitError(product.name, str(unit))

            self._items.append(
                ShoppingItem(product_id=product_id, unit=Unit(unit), quantity=DEFAULT_QUANTITY)
            )
            product.usage_count += 1

            logger.info(
                "Added product to shopping list",
                extra={
                    "product_id": product_id,
                    "unit": str(unit),
                    "usage_count": product.usage_count,
                    "list_length": len(self._items),
                },
            )

        return product
