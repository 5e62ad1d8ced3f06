"""Catalog browser endpoints: listing, search, suggestions, and refresh."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from storefront.schemas.catalog import CatalogState, CatalogView, SuggestionsResponse
from storefront.schemas.product import ProductCard
from storefront.services.catalog_store import CatalogStore
from storefront.services.dependencies import (
    get_catalog_store,
    get_presentation_service,
    get_search_service,
)
from storefront.services.presentation_service import StorefrontPresentationService
from storefront.services.search_service import SearchService

router = APIRouter()


@router.get("/", response_model=CatalogView)
async def list_products(
    q: str = Query("", description="Case-insensitive match against title or category."),
    service: StorefrontPresentationService = Depends(get_presentation_service),
) -> CatalogView:
    """Return fetch status plus the (optionally filtered) product cards.

    Examples:
        /products/?q=phone       # Titles or categories containing "phone"
        /products/?q=BEAUTY      # Matching is case-insensitive
    """

    return service.catalog_view(q or None)


@router.get("/suggestions", response_model=SuggestionsResponse)
async def product_suggestions(
    q: str = Query("", description="Partial search text typed by the user."),
    search: SearchService = Depends(get_search_service),
) -> SuggestionsResponse:
    """Autofill suggestions: matching categories first, then matching titles."""

    return SuggestionsResponse(query=q, suggestions=search.suggestions(q))


@router.post("/refresh", response_model=CatalogState)
async def refresh_products(
    catalog: CatalogStore = Depends(get_catalog_store),
) -> CatalogState:
    """Re-fetch the catalog and return the settled state.

    Fetch failures are reported through ``error_message`` with a 200 status;
    previously loaded products are kept.
    """

    return await catalog.refresh()


@router.get("/{product_id}", response_model=ProductCard)
async def get_product(
    product_id: int,
    service: StorefrontPresentationService = Depends(get_presentation_service),
) -> ProductCard:
    return service.card(service.require_product(product_id))
