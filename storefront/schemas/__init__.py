"""Pydantic schemas for store snapshots and API responses."""

from storefront.schemas.cart import (  # noqa: F401
    BadgeCounts,
    CartItemCreate,
    CartSummary,
    MembershipResponse,
)
from storefront.schemas.catalog import (  # noqa: F401
    CatalogState,
    CatalogStatus,
    CatalogView,
    SuggestionsResponse,
)
from storefront.schemas.favorites import (  # noqa: F401
    FavoritesListResponse,
    FavoriteToggleResponse,
)
from storefront.schemas.product import (  # noqa: F401
    CatalogResponse,
    Product,
    ProductCard,
)
