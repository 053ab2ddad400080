"""Pydantic schemas for products: the domain record passed between layers and API payloads."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ProductRecord(BaseModel):
    """
    A product as the service layer sees it.

    Fields are deliberately unconstrained so an invalid candidate can be built and then
    rejected by validate_product with InvalidArgument. id is None until storage assigns it.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int | None = Field(default=None, description="Storage-assigned identifier.")
    name: str | None = Field(default=None, description="Product name (non-empty).")
    quantity: int | None = Field(default=0, description="Units in stock (>= 0).")
    price: Decimal | None = Field(default=None, description="Unit price (> 0).")
    category: str | None = Field(default=None, description="Free-text category (non-empty).")


class ProductWrite(BaseModel):
    """Request body for creating or replacing a product. Rules are enforced by the service (400)."""

    model_config = {"extra": "ignore"}

    name: str | None = None
    quantity: int | None = 0
    price: Decimal | None = None
    category: str | None = None

    def to_record(self, product_id: int | None = None) -> ProductRecord:
        return ProductRecord(id=product_id, **self.model_dump())


class StockUpdate(BaseModel):
    """Request body for PATCH /products/{id}/stock."""

    quantity: int = Field(..., description="New quantity; negative values are rejected with 400.")
