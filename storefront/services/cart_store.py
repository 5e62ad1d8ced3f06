"""Shopping cart state: an insertion-ordered, duplicate-free product list."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from storefront.schemas.cart import CartSummary
from storefront.schemas.product import Product
from storefront.services.store import ObservableStore

logger = logging.getLogger(__name__)

_CENTS = Decimal("0.01")
_ZERO = Decimal("0.00")


class CartStore(ObservableStore[tuple[Product, ...]]):
    """Products the user selected for purchase, keyed by product id.

    ``add`` and ``remove`` are total: adding a product that is already present
    or removing one that is absent leaves the cart untouched and emits no
    notification. Both return whether the cart changed.
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

    @property
    def subtotal(self) -> Decimal:
        with self._lock:
            return sum((item.price for item in self._items.values()), _ZERO)

    def contains(self, product: Product) -> bool:
        with self._lock:
            return product.id in self._items

    def add(self, product: Product) -> bool:
        with self._lock:
            if product.id in self._items:
                return False
            self._items[product.id] = product
            logger.debug("Added product %s to cart (%s items)", product.id, len(self._items))
            self._notify()
        return True

    def remove(self, product: Product) -> bool:
        with self._lock:
            if self._items.pop(product.id, None) is None:
                return False
            logger.debug(
                "Removed product %s from cart (%s items)", product.id, len(self._items)
            )
            self._notify()
        return True

    def clear(self) -> None:
        with self._lock:
            if not self._items:
                return
            self._items.clear()
            self._notify()

    def summary(self) -> CartSummary:
        """Return the cart screen payload with amounts rounded to cents."""

        with self._lock:
            items = list(self._items.values())
            subtotal = self.subtotal.quantize(_CENTS, rounding=ROUND_HALF_UP)
        savings = taxes = _ZERO
        return CartSummary(
            items=items,
            item_count=len(items),
            subtotal=subtotal,
            savings=savings,
            taxes=taxes,
            total=subtotal - savings + taxes,
        )


__all__ = ["CartStore"]
