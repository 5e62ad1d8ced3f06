"""Schemas describing catalog state and search payloads."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from storefront.schemas.product import Product, ProductCard


class CatalogStatus(str, Enum):
    """Lifecycle of the most recent catalog refresh."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class CatalogState(BaseModel):
    """Immutable snapshot of the catalog store."""

    model_config = ConfigDict(frozen=True)

    products: tuple[Product, ...] = ()
    is_loading: bool = False
    error_message: str | None = None
    status: CatalogStatus = CatalogStatus.IDLE
    total: int = 0
    skip: int = 0
    limit: int = 0


class CatalogView(BaseModel):
    """Catalog browser payload: fetch status plus the visible product cards."""

    query: str = ""
    is_loading: bool
    error_message: str | None = None
    status: CatalogStatus
    total: int = Field(..., description="Number of cards in ``results``")
    results: list[ProductCard] = Field(default_factory=list)


class SuggestionsResponse(BaseModel):
    query: str
    suggestions: list[str] = Field(default_factory=list)


__all__ = [
    "CatalogState",
    "CatalogStatus",
    "CatalogView",
    "SuggestionsResponse",
]
