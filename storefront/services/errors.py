"""Exceptions raised while fetching the remote catalog.

The catalog store reports all of them to users the same way (a message
string); the subclasses exist so logs can tell configuration, transport, and
payload problems apart.
"""

from __future__ import annotations


class CatalogFetchError(Exception):
    """Base class for failures of a single catalog fetch."""

    category = "fetch_error"


class InvalidEndpointError(CatalogFetchError):
    """The configured catalog URL is not an absolute http(s) URL."""

    category = "invalid_endpoint"


class CatalogNetworkError(CatalogFetchError):
    """Transport failure, timeout, or non-success HTTP status."""

    category = "network_error"


class CatalogDecodeError(CatalogFetchError):
    """The response body did not match the catalog envelope."""

    category = "decode_error"


class ProductNotFoundError(LookupError):
    """Raised by the API layer when a product id is not in the catalog."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"No product with id {product_id} is present in the catalog")
        self.product_id = product_id


__all__ = [
    "CatalogDecodeError",
    "CatalogFetchError",
    "CatalogNetworkError",
    "InvalidEndpointError",
    "ProductNotFoundError",
]
