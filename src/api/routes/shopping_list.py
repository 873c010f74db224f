"""Shopping list endpoints for the ShopList API."""

import logging

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_shopping_service
from src.api.schemas import AddItemRequest, ErrorResponse, MessageResponse
from src.shopping.service import DEFAULT_QUANTITY, ShoppingService

# Configure module logger
logger = logging.getLogger(__name__)

# Create API router
router = APIRouter(
    prefix="/shopping-list",
    tags=["shopping-list"],
)


@router.post(
    "/add",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)
def add_item(
    item: AddItemRequest,
    service: ShoppingService = Depends(get_shopping_service),
) -> MessageResponse:
    """Add a product to the shopping list.

    Raises:
        ProductNotFoundError: 404 when the product ID is unknown.
        InvalidUnitError: 400 when the product is not sold in the unit.

    Example:
        POST /shopping-list/add {"ProductID": 1, "Unit": "l"}
        Returns 201 with {"message": "Added 'Mleko' to the shopping list"}.
    """
    if item.quantity != DEFAULT_QUANTITY:
        logger.debug(
            f"Ignoring requested quantity {item.quantity} for product {item.product_id}"
        )

    product = service.add_product_to_list(item.product_id, item.unit)
    return MessageResponse(message=f"Added '{product.name}' to the shopping list")
