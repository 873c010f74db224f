"""Shared pytest fixtures for the ShopList test suite."""

import sys
from pathlib import Path
from typing import Generator

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.api.dependencies import reset_shopping_service
from src.config import reset_settings_cache
from src.shopping.repository import InMemoryProductRepository
from src.shopping.service import ShoppingService


@pytest.fixture(autouse=True)
def fresh_service_state() -> Generator[None, None, None]:
    """Give every test a freshly seeded catalog and an empty shopping list."""
    reset_shopping_service()
    yield
    reset_shopping_service()
    reset_settings_cache()


@pytest.fixture
def repository() -> InMemoryProductRepository:
    """Repository seeded with the default catalog."""
    return InMemoryProductRepository()


@pytest.fixture
def service(repository) -> ShoppingService:
    """Shopping service over the seeded repository."""
    return ShoppingService(repository)
