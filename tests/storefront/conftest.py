"""Shared fixtures: sample products and a fake catalog endpoint."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from typing import Any

import pytest
import pytest_asyncio

from storefront.services.catalog_client import CatalogClient
from storefront.services.catalog_store import CatalogStore
from tests.storefront.support.catalog_endpoint import FakeCatalogEndpoint

CATALOG_URL = "https://catalog.test/products"


@pytest.fixture
def catalog_payload() -> dict[str, Any]:
    """Envelope in the shape served by the remote catalog endpoint."""
    return {
        "products": [
            {
                "id": 1,
                "title": "A",
                "price": 9.99,
                "description": "First product",
                "category": "beauty",
                "thumbnail": "https://cdn.test/1.jpg",
                "rating": 4.5,
            },
            {
                "id": 2,
                "title": "B",
                "price": 5.00,
                "description": "Second product",
                "category": "groceries",
                "thumbnail": "https://cdn.test/2.jpg",
            },
        ],
        "total": 194,
        "skip": 0,
        "limit": 2,
    }


@pytest.fixture
def endpoint(catalog_payload: dict[str, Any]) -> FakeCatalogEndpoint:
    fake = FakeCatalogEndpoint()
    fake.respond_json(catalog_payload)
    return fake


@pytest.fixture
def client_factory(
    endpoint: FakeCatalogEndpoint,
) -> Callable[..., CatalogClient]:
    def _build(url: str = CATALOG_URL) -> CatalogClient:
        return CatalogClient(url, timeout=1.0, transport=endpoint.transport)

    return _build


@pytest_asyncio.fixture
async def catalog_store(
    client_factory: Callable[..., CatalogClient],
) -> AsyncIterator[CatalogStore]:
    store = CatalogStore(client_factory())
    yield store
    await store.aclose()
