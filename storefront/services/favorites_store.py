"""Favorite products, flipped on and off with a single toggle."""

from __future__ import annotations

import logging

from storefront.schemas.product import Product
from storefront.services.store import ObservableStore

logger = logging.getLogger(__name__)


class FavoritesStore(ObservableStore[tuple[Product, ...]]):
    """Set of favorite products keyed by id.

    Membership order carries no meaning; listings use insertion order only so
    the "my items" screen stays stable between renders.
    """

    def __init__(self) -> None:
        super().__init__()
        self._items: dict[int, Product] = {}

    def snapshot(self) -> tuple[Product, ...]:
        with self._lock:
            return tuple(self._items.values())

    @property
    def items(self) -> tuple[Product, ...]:
        return self.snapshot()

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def contains(self, product: Product) -> bool:
        with self._lock:
            return product.id in self._items

    def toggle(self, product: Product) -> bool:
        """Flip ``product``'s favorite state and return the new state."""

        with self._lock:
            if product.id in self._items:
                del self._items[product.id]
                is_favorite = False
            else:
                self._items[product.id] = product
                is_favorite = True
            logger.debug("Product %s favorite=%s", product.id, is_favorite)
            self._notify()
        return is_favorite


__all__ = ["FavoritesStore"]
