"""Product catalog endpoints for the ShopList API.

Read-only queries served straight from the product repository.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends

from src.api.dependencies import get_app_settings, get_product_repository
from src.api.exceptions import ShoppingListException
from src.api.schemas import ProductResponse
from src.config import Settings
from src.shopping.repository import ProductRepository

# Configure module logger
logger = logging.getLogger(__name__)

# Create API router
router = APIRouter(
    prefix="/products",
    tags=["products"],
)


def parse_limit(raw_limit: Optional[str], default: int) -> int:
    """Turn the ``limit`` query parameter into a positive integer.

    Anything that is not a positive integer falls back to ``default``.
    """
    if raw_limit is None:
        return default
    try:
        limit = int(raw_limit)
    except ValueError:
        return default
    return limit if limit > 0 else default


@router.get("", response_model=List[ProductResponse])
def get_products(
    category: Optional[str] = None,
    repository: ProductRepository = Depends(get_product_repository),
) -> List[ProductResponse]:
    """List catalog products.

    Args:
        category: Optional category filter, matched case-insensitively.
            An empty value lists the whole catalog.

    Returns:
        Products in catalog order. Empty when no product is in ``category``.

    Example:
        GET /products?category=warzywa
    """
    try:
        if category:
            products = repository.get_by_category(category)
        else:
            products = repository.get_all()
    except ShoppingListException:
        raise
    except Exception as e:
        logger.error(f"Failed to list products: {e}", exc_info=True)
        raise ShoppingListException(f"Failed to list products: {e}") from e

    logger.debug(f"Listing {len(products)} products (category={category!r})")
    return [ProductResponse.from_product(p) for p in products]


@router.get("/most-used", response_model=List[ProductResponse])
def get_most_used_products(
    limit: Optional[str] = None,
    repository: ProductRepository = Depends(get_product_repository),
    settings: Settings = Depends(get_app_settings),
) -> List[ProductResponse]:
    """List the products added to the shopping list most often.

    Args:
        limit: Maximum number of products. Non-numeric or non-positive values
            are ignored and the configured default (3) is used.

    Returns:
        Products sorted by usage count, highest first.

    Example:
        GET /products/most-used?limit=5
    """
    effective_limit = parse_limit(limit, settings.default_most_used_limit)

    try:
        products = repository.get_most_used(effective_limit)
    except ShoppingListException:
        raise
    except Exception as e:
        logger.error(f"Failed to rank products: {e}", exc_info=True)
        raise ShoppingListException(f"Failed to rank products: {e}") from e

    return [ProductResponse.from_product(p) for p in products]
