"""FastAPI dependency wiring for the storefront stores and services.

The three stores are process-wide singletons shared by every request. Tests
replace them through ``app.dependency_overrides`` or await
:func:`reset_stores` to start from empty state.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from storefront.services.cart_store import CartStore
from storefront.services.catalog_client import CatalogClient
from storefront.services.catalog_store import CatalogStore
from storefront.services.favorites_store import FavoritesStore
from storefront.services.presentation_service import StorefrontPresentationService
from storefront.services.search_service import SearchService
from storefront.settings import get_settings


@lru_cache(maxsize=1)
def get_catalog_store() -> CatalogStore:
    """Return the shared catalog store bound to the configured endpoint."""

    active_settings = get_settings()
    client = CatalogClient(
        active_settings.catalog_url,
        timeout=active_settings.catalog_timeout_seconds,
    )
    return CatalogStore(client)


@lru_cache(maxsize=1)
def get_cart_store() -> CartStore:
    return CartStore()


@lru_cache(maxsize=1)
def get_favorites_store() -> FavoritesStore:
    return FavoritesStore()


def get_search_service(
    catalog: CatalogStore = Depends(get_catalog_store),
) -> SearchService:
    return SearchService(catalog)


def get_presentation_service(
    catalog: CatalogStore = Depends(get_catalog_store),
    cart: CartStore = Depends(get_cart_store),
    favorites: FavoritesStore = Depends(get_favorites_store),
) -> StorefrontPresentationService:
    """Wire the three stores into the screen-level presentation service."""

    return StorefrontPresentationService(catalog=catalog, cart=cart, favorites=favorites)


async def reset_stores() -> None:
    """Close the cached catalog store and drop every singleton.

    The next dependency resolution builds fresh, empty stores.
    """

    if get_catalog_store.cache_info().currsize:
        await get_catalog_store().aclose()
    get_catalog_store.cache_clear()
    get_cart_store.cache_clear()
    get_favorites_store.cache_clear()


__all__ = [
    "get_cart_store",
    "get_catalog_store",
    "get_favorites_store",
    "get_presentation_service",
    "get_search_service",
    "reset_stores",
]
