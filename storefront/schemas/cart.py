"""Pydantic schemas for the shopping cart surface."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from storefront.schemas.product import Product


class CartItemCreate(BaseModel):
    """Payload used to add a catalog product to the cart."""

    product_id: int = Field(..., description="Identifier of a product in the catalog")


class CartSummary(BaseModel):
    """Cart contents with the derived amounts shown on the cart screen."""

    items: list[Product] = Field(default_factory=list)
    item_count: int = 0
    subtotal: Decimal = Field(default=Decimal("0.00"))
    savings: Decimal = Field(default=Decimal("0.00"), description="No discounts apply.")
    taxes: Decimal = Field(default=Decimal("0.00"), description="No taxes apply.")
    total: Decimal = Field(
        default=Decimal("0.00"),
        description="Subtotal less savings plus taxes.",
    )


class MembershipResponse(BaseModel):
    product_id: int
    present: bool


class BadgeCounts(BaseModel):
    cart_items: int = 0
    favorites: int = 0


__all__ = ["BadgeCounts", "CartItemCreate", "CartSummary", "MembershipResponse"]
