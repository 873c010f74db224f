"""ShopList: in-memory shopping-list service.

This package provides a small backend service exposing a product catalog and
an append-only shopping list that tracks how often each product is added.

Modules:
    api: FastAPI application and REST API endpoints
    shopping: product repository and shopping-list service logic
"""

__version__ = "0.1.0"
