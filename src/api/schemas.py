"""Request and response models for the ShopList API."""

from typing import List, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

from src.shopping.models import Product, Unit


class ProductResponse(BaseModel):
    """Public view of a catalog product.

    The usage count is internal bookkeeping and is never serialized.

    Attributes:
        id: Product ID.
        name: Display name.
        category: Category label.
        available_units: Units the product can be added in.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Product ID")
    name: str = Field(..., description="Display name")
    category: str = Field(..., description="Category label")
    available_units: List[Unit] = Field(
        ..., alias="availableUnits", description="Units the product is sold in"
    )

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            category=product.category,
            available_units=list(product.available_units),
        )


class AddItemRequest(BaseModel):
    """Body of ``POST /shopping-list/add``.

    Missing fields fall back to zero values, so an absent ``ProductID``
    resolves to an unknown product and an absent ``Unit`` to an invalid unit.
    ``Quantity`` is accepted but the list always records a quantity of 1.
    Values are not coerced: ``"1"``, ``true`` or ``1.0`` are not product IDs.
    """

    product_id: StrictInt = Field(
        default=0, validation_alias=AliasChoices("ProductID", "productId", "product_id")
    )
    quantity: Union[StrictInt, StrictFloat] = Field(
        default=1.0, validation_alias=AliasChoices("Quantity", "quantity")
    )
    unit: StrictStr = Field(default="", validation_alias=AliasChoices("Unit", "unit"))


class MessageResponse(BaseModel):
    """Confirmation message returned after a successful addition."""

    message: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
