"""Shopping-list core for ShopList.

Holds the product catalog, the repository that answers catalog queries and
the service that records additions to the shopping list.
"""

from src.shopping.models import Product, ShoppingItem, Unit
from src.shopping.repository import InMemoryProductRepository, ProductRepository
from src.shopping.service import ShoppingService

__all__ = [
    "InMemoryProductRepository",
    "Product",
    "ProductRepository",
    "ShoppingItem",
    "ShoppingService",
    "Unit",
]
