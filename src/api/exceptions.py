"""Custom exceptions for the ShopList API.

Defines specific exception types for better error handling and reporting.
Each exception carries the HTTP status code the API responds with.
"""

from typing import Any, Dict, Optional


class ShoppingListException(Exception):
    """Base exception for ShopList errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code for API responses
            details: Additional error details for debugging
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}


class ProductNotFoundError(ShoppingListException):
    """Raised when no product in the catalog has the requested ID."""

    def __init__(self, product_id: int, details: Optional[Dict[str, Any]] = None):
        message = f"Product with ID {product_id} was not found"
        super().__init__(
            message=message,
            status_code=404,
            details=details or {"product_id": product_id},
        )
        self.product_id = product_id


class InvalidUnitError(ShoppingListException):
    """Raised when a product cannot be bought in the requested unit."""

    def __init__(self, product_name: str, unit: str):
        message = f"Product {product_name} is not available in unit {unit}"
        super().__init__(
            message=message,
            status_code=400,
            details={"product_name": product_name, "unit": unit},
        )


class MalformedRequestError(ShoppingListException):
    """Raised when a request body cannot be decoded."""

    def __init__(self, reason: str):
        super().__init__(
            message="Invalid JSON format",
            status_code=400,
            details={"reason": reason},
        )


class MethodNotAllowedError(ShoppingListException):
    """Raised when an endpoint is called with an unsupported HTTP method."""

    def __init__(self, method: str, path: str):
        super().__init__(
            message="Method not allowed",
            status_code=405,
            details={"method": method, "path": path},
        )
