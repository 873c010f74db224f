"""Dependency definitions for the ShopList API.

The service runs a single in-memory shopping list per process. It is created
lazily on first use and shared by all requests.
"""

import logging
import threading
from typing import Optional

from fastapi import Depends, Request

from src.config import Settings, get_settings
from src.shopping.repository import InMemoryProductRepository, ProductRepository
from src.shopping.service import ShoppingService

# Configure module logger
logger = logging.getLogger(__name__)

_service: Optional[ShoppingService] = None
_service_lock = threading.Lock()


def get_shopping_service() -> ShoppingService:
    """Return the process-wide shopping service, creating it if needed."""
    global _service

    if _service is None:
        with _service_lock:
            if _service is None:
                logger.info("Creating shopping service with seeded catalog")
                _service = ShoppingService(InMemoryProductRepository())
    return _service


def get_product_repository(
    service: ShoppingService = Depends(get_shopping_service),
) -> ProductRepository:
    """Return the repository shared with the shopping service."""
    return service.repository


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""
    return getattr(request.app.state, "settings", None) or get_settings()


def reset_shopping_service() -> None:
    """Drop the current service so the next request gets a fresh catalog and list."""
    global _service

    with _service_lock:
        _service = None
