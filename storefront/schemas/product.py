"""Catalog product schemas shared by the stores and the API surface."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A single catalog entry as published by the remote endpoint.

    Products are immutable and identified solely by ``id``: two instances with
    the same identifier compare equal and hash identically even when other
    fields differ. The stores rely on this when checking membership.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(..., description="Unique catalog key")
    title: str
    price: Decimal = Field(..., ge=0, description="Unit price in store currency")
    description: str
    category: str
    thumbnail: str = Field(..., description="Thumbnail image URL")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class CatalogResponse(BaseModel):
    """Wire envelope returned by ``GET /products`` on the catalog endpoint.

    ``total``/``skip``/``limit`` describe the remote page but are not used for
    pagination here; they are kept on the catalog state for diagnostics.
    """

    model_config = ConfigDict(extra="ignore")

    products: list[Product]
    total: int
    skip: int
    limit: int


class ProductCard(BaseModel):
    """A product decorated with the caller's cart and favorite state."""

    product: Product
    is_favorite: bool = False
    in_cart: bool = False


__all__ = ["CatalogResponse", "Product", "ProductCard"]
