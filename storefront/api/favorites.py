"""FastAPI router for the "my items" favorites screen."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from storefront.schemas.cart import MembershipResponse
from storefront.schemas.favorites import FavoritesListResponse, FavoriteToggleResponse
from storefront.services.dependencies import (
    get_favorites_store,
    get_presentation_service,
)
from storefront.services.favorites_store import FavoritesStore
from storefront.services.presentation_service import StorefrontPresentationService

router = APIRouter()


@router.get("/", response_model=FavoritesListResponse)
async def list_favorites(
    service: StorefrontPresentationService = Depends(get_presentation_service),
) -> FavoritesListResponse:
    """Return favorite product cards, each flagged with its cart state."""

    return service.favorites_view()


@router.post("/{product_id}/toggle", response_model=FavoriteToggleResponse)
async def toggle_favorite(
    product_id: int,
    favorites: FavoritesStore = Depends(get_favorites_store),
    service: StorefrontPresentationService = Depends(get_presentation_service),
) -> FavoriteToggleResponse:
    is_favorite = favorites.toggle(service.require_product(product_id))
    return FavoriteToggleResponse(product_id=product_id, is_favorite=is_favorite)


@router.get("/{product_id}", response_model=MembershipResponse)
async def favorite_contains(
    product_id: int,
    favorites: FavoritesStore = Depends(get_favorites_store),
    service: StorefrontPresentationService = Depends(get_presentation_service),
) -> MembershipResponse:
    product = service.require_product(product_id)
    return MembershipResponse(product_id=product_id, present=favorites.contains(product))
