"""Integration-style tests that exercise the FastAPI routes against fake stores."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from storefront.main import app
from storefront.services.cart_store import CartStore
from storefront.services.catalog_client import CatalogClient
from storefront.services.catalog_store import CatalogStore
from storefront.services.dependencies import (
    get_cart_store,
    get_catalog_store,
    get_favorites_store,
)
from storefront.services.favorites_store import FavoritesStore
from tests.storefront.support.catalog_endpoint import FakeCatalogEndpoint


@pytest_asyncio.fixture
async def api_client(
    client_factory: Callable[..., CatalogClient],
) -> AsyncIterator[AsyncClient]:
    """Create an ``AsyncClient`` wired up with fresh stores and a fake catalog."""

    catalog = CatalogStore(client_factory())
    cart = CartStore()
    favorites = FavoritesStore()

    app.dependency_overrides.clear()
    app.dependency_overrides[get_catalog_store] = lambda: catalog
    app.dependency_overrides[get_cart_store] = lambda: cart
    app.dependency_overrides[get_favorites_store] = lambda: favorites

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client

    app.dependency_overrides.clear()
    await catalog.aclose()


@pytest_asyncio.fixture
async def loaded_client(api_client: AsyncClient) -> AsyncClient:
    response = await api_client.post("/products/refresh")
    assert response.status_code == 200
    return api_client


@pytest.mark.asyncio
async def test_health(api_client: AsyncClient) -> None:
    response = await api_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["X-Request-ID"]


@pytest.mark.asyncio
async def test_catalog_is_idle_before_refresh(api_client: AsyncClient) -> None:
    response = await api_client.get("/products/")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "idle"
    assert payload["is_loading"] is False
    assert payload["results"] == []


@pytest.mark.asyncio
async def test_refresh_populates_catalog(api_client: AsyncClient) -> None:
    refreshed = await api_client.post("/products/refresh")

    assert refreshed.status_code == 200
    state = refreshed.json()
    assert state["status"] == "loaded"
    assert state["error_message"] is None
    assert [product["id"] for product in state["products"]] == [1, 2]

    listing = (await api_client.get("/products/")).json()
    assert listing["total"] == 2
    assert listing["results"][0]["product"]["title"] == "A"
    assert listing["results"][0]["is_favorite"] is False
    assert listing["results"][0]["in_cart"] is False


@pytest.mark.asyncio
async def test_refresh_failure_is_reported_in_body(
    loaded_client: AsyncClient, endpoint: FakeCatalogEndpoint
) -> None:
    endpoint.respond_raw(b"", status_code=500)

    response = await loaded_client.post("/products/refresh")

    assert response.status_code == 200
    state = response.json()
    assert state["status"] == "failed"
    assert state["error_message"]
    assert len(state["products"]) == 2


@pytest.mark.asyncio
async def test_search_filters_by_category(loaded_client: AsyncClient) -> None:
    response = await loaded_client.get("/products/?q=GROCER")

    payload = response.json()
    assert payload["query"] == "GROCER"
    assert [card["product"]["id"] for card in payload["results"]] == [2]


@pytest.mark.asyncio
async def test_search_without_match_is_empty(loaded_client: AsyncClient) -> None:
    payload = (await loaded_client.get("/products/?q=laptop")).json()

    assert payload["total"] == 0
    assert payload["results"] == []


@pytest.mark.asyncio
async def test_suggestions(loaded_client: AsyncClient) -> None:
    response = await loaded_client.get("/products/suggestions?q=b")

    assert response.status_code == 200
    assert response.json() == {"query": "b", "suggestions": ["B", "beauty"]}


@pytest.mark.asyncio
async def test_unknown_product_returns_structured_404(loaded_client: AsyncClient) -> None:
    response = await loaded_client.get("/products/42")

    assert response.status_code == 404
    payload = response.json()
    assert payload["error_type"] == "not_found"
    assert payload["path"] == "/products/42"
    assert payload["request_id"] == response.headers["X-Request-ID"]


@pytest.mark.asyncio
async def test_client_request_id_is_echoed(loaded_client: AsyncClient) -> None:
    response = await loaded_client.get(
        "/products/42", headers={"X-Request-ID": "checkout-trace-7"}
    )

    assert response.headers["X-Request-ID"] == "checkout-trace-7"
    assert response.json()["request_id"] == "checkout-trace-7"


@pytest.mark.asyncio
async def test_cart_add_is_idempotent_and_totals(loaded_client: AsyncClient) -> None:
    await loaded_client.post("/cart/items", json={"product_id": 1})
    await loaded_client.post("/cart/items", json={"product_id": 1})
    response = await loaded_client.post("/cart/items", json={"product_id": 2})

    summary = response.json()
    assert summary["item_count"] == 2
    assert [item["id"] for item in summary["items"]] == [1, 2]
    assert summary["subtotal"] == "14.99"
    assert summary["savings"] == "0.00"
    assert summary["taxes"] == "0.00"
    assert summary["total"] == "14.99"

    membership = (await loaded_client.get("/cart/items/1")).json()
    assert membership == {"product_id": 1, "present": True}


@pytest.mark.asyncio
async def test_cart_remove_is_noop_when_absent(loaded_client: AsyncClient) -> None:
    await loaded_client.post("/cart/items", json={"product_id": 1})

    first = await loaded_client.delete("/cart/items/1")
    second = await loaded_client.delete("/cart/items/1")

    assert first.status_code == 204
    assert second.status_code == 204
    summary = (await loaded_client.get("/cart/")).json()
    assert summary["item_count"] == 0
    assert summary["subtotal"] == "0.00"


@pytest.mark.asyncio
async def test_cart_add_unknown_product_is_404(loaded_client: AsyncClient) -> None:
    response = await loaded_client.post("/cart/items", json={"product_id": 999})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_cart_add_validates_payload(loaded_client: AsyncClient) -> None:
    response = await loaded_client.post("/cart/items", json={"product_id": "abc"})

    assert response.status_code == 422
    payload = response.json()
    assert payload["error_type"] == "validation_error"
    assert payload["errors"][0]["field"] == "body.product_id"


@pytest.mark.asyncio
async def test_checkout_is_noop(loaded_client: AsyncClient) -> None:
    await loaded_client.post("/cart/items", json={"product_id": 2})

    response = await loaded_client.post("/cart/checkout")

    assert response.status_code == 202
    assert response.json()["item_count"] == 1
    assert (await loaded_client.get("/cart/")).json()["item_count"] == 1


@pytest.mark.asyncio
async def test_favorite_toggle_round_trip(loaded_client: AsyncClient) -> None:
    on = (await loaded_client.post("/favorites/1/toggle")).json()
    assert on == {"product_id": 1, "is_favorite": True}
    assert (await loaded_client.get("/favorites/1")).json()["present"] is True

    off = (await loaded_client.post("/favorites/1/toggle")).json()
    assert off == {"product_id": 1, "is_favorite": False}
    assert (await loaded_client.get("/favorites/")).json() == {"total": 0, "items": []}


@pytest.mark.asyncio
async def test_my_items_reflect_cart_state(loaded_client: AsyncClient) -> None:
    await loaded_client.post("/favorites/2/toggle")
    await loaded_client.post("/cart/items", json={"product_id": 2})
    await loaded_client.post("/favorites/2/toggle")
    await loaded_client.post("/favorites/2/toggle")

    favorites = (await loaded_client.get("/favorites/")).json()
    assert favorites["total"] == 1
    card = favorites["items"][0]
    assert card["product"]["id"] == 2
    assert card["in_cart"] is True
    assert card["is_favorite"] is True

    assert (await loaded_client.get("/cart/")).json()["item_count"] == 1

    listing = (await loaded_client.get("/products/?q=groceries")).json()
    assert listing["results"][0]["in_cart"] is True


@pytest.mark.asyncio
async def test_badges_count_cart_and_favorites(loaded_client: AsyncClient) -> None:
    await loaded_client.post("/cart/items", json={"product_id": 1})
    await loaded_client.post("/cart/items", json={"product_id": 2})
    await loaded_client.post("/favorites/1/toggle")

    response = await loaded_client.get("/badges/")

    assert response.json() == {"cart_items": 2, "favorites": 1}
