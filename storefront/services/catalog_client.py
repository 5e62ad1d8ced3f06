"""HTTP client for the remote product catalog."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from storefront.schemas.product import CatalogResponse
from storefront.services.errors import (
    CatalogDecodeError,
    CatalogNetworkError,
    InvalidEndpointError,
)
from storefront.settings import DEFAULT_CATALOG_TIMEOUT_SECONDS, is_valid_endpoint

logger = logging.getLogger(__name__)


class CatalogClient:
    """Fetch and decode the catalog envelope with a single ``GET``.

    No headers, query parameters, or credentials are sent, and nothing is
    retried: one call to :meth:`fetch_products` is one request. Every failure
    is translated into a :class:`~storefront.services.errors.CatalogFetchError`
    subclass so callers handle a single hierarchy instead of ``httpx`` and
    ``pydantic`` exceptions.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float = DEFAULT_CATALOG_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._client = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
        )

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def fetch_products(self) -> CatalogResponse:
        """Return the decoded catalog envelope or raise a fetch error."""

        if not is_valid_endpoint(self._endpoint):
            raise InvalidEndpointError(f"Invalid catalog URL: {self._endpoint!r}")

        try:
            response = await self._client.get(self._endpoint)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise CatalogNetworkError("The catalog request timed out.") from exc
        except httpx.HTTPStatusError as exc:
            raise CatalogNetworkError(
                f"The catalog server responded with HTTP {exc.response.status_code}."
            ) from exc
        except httpx.HTTPError as exc:
            raise CatalogNetworkError(
                f"Could not reach the catalog server: {exc}"
            ) from exc

        try:
            envelope = CatalogResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise CatalogDecodeError(
                "The catalog data couldn't be read because it isn't in the "
                f"correct format ({exc.error_count()} problem(s))."
            ) from exc

        logger.debug(
            "Decoded %s products from %s (total=%s skip=%s limit=%s)",
            len(envelope.products),
            self._endpoint,
            envelope.total,
            envelope.skip,
            envelope.limit,
        )
        return envelope

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> CatalogClient:
        return self

    async def __aexit__(self, *_exc_info: object) -> None:
        await self.aclose()


__all__ = ["CatalogClient"]
