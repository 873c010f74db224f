"""Product repository module.

Owns the product catalog and answers lookup, filter and ranking queries.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from src.api.exceptions import ProductNotFoundError
from src.shopping.catalog import build_default_catalog
from src.shopping.models import Product

# Configure module logger
logger = logging.getLogger(__name__)


class ProductRepository(ABC):
    """Read access to the product catalog.

    ``usage_lock`` guards usage counts. Every service sharing a repository
    takes this same lock, so their additions serialize with each other.
    """

    def __init__(self) -> None:
        self.usage_lock = threading.RLock()

    @abstractmethod
    def get_all(self) -> List[Product]:
        """Return all products in catalog order."""

    @abstractmethod
    def get_by_category(self, category: str) -> List[Product]:
        """Return products whose category matches, ignoring case."""

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product:
        """Return the stored product with the given ID.

        Raises:
            ProductNotFoundError: If no product has that ID.
        """

    @abstractmethod
    def get_most_used(self, limit: int) -> List[Product]:
        """Return up to ``limit`` products ordered by usage count."""


class InMemoryProductRepository(ProductRepository):
    """Product repository backed by an in-memory list.

    Products are kept in insertion order alongside an ID index. Lookups return
    the stored objects themselves, so usage count changes made through them are
    visible to every later query.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        """Initialize the repository.

        Args:
            products: Catalog to serve. Defaults to the seeded sample catalog.

        Raises:
            ValueError: If two products share an ID.
        """
        super().__init__()
        self._products: List[Product] = (
            list(products) if products is not None else build_default_catalog()
        )
        self._index: Dict[int, Product] = {}
        for product in self._products:
            if product.id in self._index:
                raise ValueError(f"Duplicate product ID in catalog: {product.id}")
            self._index[product.id] = product

        logger.info(f"Initialized product repository with {len(self._products)} products")

    def get_all(self) -> List[Product]:
        return list(self._products)

    def get_by_category(self, category: str) -> List[Product]:
        wanted = category.casefold()
        return [p for p in self._products if p.category.casefold() == wanted]

    def find_by_id(self, product_id: int) -> Product:
        product = self._index.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def get_most_used(self, limit: int) -> List[Product]:
        """Return the most frequently added products.

        Sorting is stable, so products with equal usage counts keep their
        catalog order. The catalog itself is never reordered.

        Args:
            limit: Maximum number of products to return. Callers are expected
                to pass a positive value.

        Returns:
            New list of at most ``min(limit, catalog size)`` products, usage
            count non-increasing.
        """
        with self.usage_lock:
            ranked = sorted(self._products, key=lambda p: p.usage_count, reverse=True)
        return ranked[:limit]

    def __len__(self) -> int:
        return len(self._products)
