from __future__ import annotations

from collections.abc import Iterable, Sequence

from storefront.schemas.product import Product
from storefront.services.catalog_store import CatalogStore

SUGGESTION_LIMIT = 5


def _matches(text: str, needle: str) -> bool:
    return needle in text.casefold()


def filter_products(products: Sequence[Product], query: str | None) -> list[Product]:
    """Return products whose title or category contains ``query``.

    Matching is case-insensitive and keeps catalog order. Only an empty query
    returns every product; whitespace is matched literally.
    """

    if not query:
        return list(products)
    needle = query.casefold()
    return [
        product
        for product in products
        if _matches(product.title, needle) or _matches(product.category, needle)
    ]


def autofill_suggestions(
    products: Iterable[Product],
    query: str | None,
    *,
    limit: int = SUGGESTION_LIMIT,
) -> list[str]:
    """Suggest search completions for ``query``.

    Matching categories (deduplicated) come before matching titles; the first
    ``limit`` of those candidates are returned in sorted order.
    """

    if not query:
        return []

    needle = query.casefold()
    products = list(products)
    categories = dict.fromkeys(
        product.category for product in products if _matches(product.category, needle)
    )
    titles = [product.title for product in products if _matches(product.title, needle)]
    return sorted([*categories, *titles][:limit])


class SearchService:
    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def suggestions(self, query: str | None) -> list[str]:
        return autofill_suggestions(self._catalog.products, query)


__all__ = ["SUGGESTION_LIMIT", "SearchService", "autofill_suggestions", "filter_products"]
