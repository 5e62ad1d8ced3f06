"""Pydantic schemas that power the favorites ("my items") API surface."""

from __future__ import annotations

from pydantic import BaseModel, Field

from storefront.schemas.product import ProductCard


class FavoritesListResponse(BaseModel):
    total: int = 0
    items: list[ProductCard] = Field(default_factory=list)


class FavoriteToggleResponse(BaseModel):
    """Result of flipping a product's favorite flag."""

    product_id: int
    is_favorite: bool


__all__ = ["FavoriteToggleResponse", "FavoritesListResponse"]
