"""Presentation-focused service composing screen payloads from the stores."""

from __future__ import annotations

from collections.abc import Iterable

from storefront.schemas.cart import BadgeCounts
from storefront.schemas.catalog import CatalogView
from storefront.schemas.favorites import FavoritesListResponse
from storefront.schemas.product import Product, ProductCard
from storefront.services.cart_store import CartStore
from storefront.services.catalog_store import CatalogStore
from storefront.services.errors import ProductNotFoundError
from storefront.services.favorites_store import FavoritesStore
from storefront.services.search_service import filter_products


class StorefrontPresentationService:
    """Decorate catalog products with cart and favorite state for the screens."""

    def __init__(
        self,
        *,
        catalog: CatalogStore,
        cart: CartStore,
        favorites: FavoritesStore,
    ) -> None:
        self._catalog = catalog
        self._cart = cart
        self._favorites = favorites

    def require_product(self, product_id: int) -> Product:
        """Return the catalog product with ``product_id`` or raise ``ProductNotFoundError``."""

        product = self._catalog.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def card(self, product: Product) -> ProductCard:
        return ProductCard(
            product=product,
            is_favorite=self._favorites.contains(product),
            in_cart=self._cart.contains(product),
        )

    def cards(self, products: Iterable[Product]) -> list[ProductCard]:
        return [self.card(product) for product in products]

    def catalog_view(self, query: str | None = None) -> CatalogView:
        """Build the catalog browser payload from a single state snapshot."""

        state = self._catalog.state
        cards = self.cards(filter_products(state.products, query))
        return CatalogView(
            query=query or "",
            is_loading=state.is_loading,
            error_message=state.error_message,
            status=state.status,
            total=len(cards),
            results=cards,
        )

    def favorites_view(self) -> FavoritesListResponse:
        cards = self.cards(self._favorites.items)
        return FavoritesListResponse(total=len(cards), items=cards)

    def badges(self) -> BadgeCounts:
        return BadgeCounts(cart_items=self._cart.count, favorites=self._favorites.count)


__all__ = ["StorefrontPresentationService"]
