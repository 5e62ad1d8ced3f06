"""Catalog state and the asynchronous refresh that populates it."""

from __future__ import annotations

import asyncio
import logging

from storefront.schemas.catalog import CatalogState, CatalogStatus
from storefront.schemas.product import CatalogResponse, Product
from storefront.services.catalog_client import CatalogClient
from storefront.services.errors import CatalogFetchError
from storefront.services.store import ObservableStore

logger = logging.getLogger(__name__)


class CatalogStore(ObservableStore[CatalogState]):
    """Holds the fetched products together with the fetch status.

    Refresh policy:

    * Overlapping calls are coalesced. A :meth:`refresh` issued while another
      is in flight awaits the running fetch instead of starting a second one,
      and both callers observe the same resulting state.
    * Failures never propagate. They are logged, surfaced through
      ``error_message``, and the previously loaded products are retained.
    * After :meth:`aclose` the store no longer accepts results, so a fetch
      finishing during shutdown cannot write into a torn-down store.
    """

    def __init__(self, client: CatalogClient) -> None:
        super().__init__()
        self._client = client
        self._state = CatalogState()
        self._index: dict[int, Product] = {}
        self._inflight: asyncio.Task[CatalogState] | None = None
        self._closed = False

    def snapshot(self) -> CatalogState:
        with self._lock:
            return self._state

    @property
    def state(self) -> CatalogState:
        return self.snapshot()

    @property
    def products(self) -> tuple[Product, ...]:
        return self.snapshot().products

    @property
    def closed(self) -> bool:
        return self._closed

    def get(self, product_id: int) -> Product | None:
        with self._lock:
            return self._index.get(product_id)

    def categories(self) -> list[str]:
        """Return the distinct product categories in first-seen order."""

        return list(dict.fromkeys(product.category for product in self.products))

    async def refresh(self) -> CatalogState:
        """Fetch the catalog and return the state once the fetch settles."""

        if self._closed:
            logger.debug("Ignoring refresh on a closed catalog store")
            return self.snapshot()

        if self._inflight is None or self._inflight.done():
            self._inflight = asyncio.create_task(self._run_refresh())
        else:
            logger.debug("Catalog refresh already in flight; joining it")

        # Shielded so a cancelled caller does not abort the fetch other
        # callers may be waiting on.
        return await asyncio.shield(self._inflight)

    async def aclose(self) -> None:
        """Stop accepting fetch results and release the HTTP client."""

        self._closed = True
        await self._client.aclose()

    async def _run_refresh(self) -> CatalogState:
        self._apply(
            self._state.model_copy(
                update={
                    "is_loading": True,
                    "error_message": None,
                    "status": CatalogStatus.LOADING,
                }
            )
        )
        logger.info("Refreshing catalog from %s", self._client.endpoint)

        try:
            envelope = await self._client.fetch_products()
        except CatalogFetchError as exc:
            logger.warning("Catalog refresh failed (%s): %s", exc.category, exc)
            self._fail(str(exc))
        except Exception as exc:
            logger.exception("Unexpected error while refreshing the catalog")
            self._fail(f"Unexpected error while loading products: {exc}")
        else:
            self._load(envelope)

        return self.snapshot()

    def _load(self, envelope: CatalogResponse) -> None:
        if self._closed:
            logger.debug("Discarding catalog payload received after close")
            return

        self._apply(
            CatalogState(
                products=tuple(envelope.products),
                is_loading=False,
                error_message=None,
                status=CatalogStatus.LOADED,
                total=envelope.total,
                skip=envelope.skip,
                limit=envelope.limit,
            )
        )
        logger.info("Catalog loaded with %s products", len(envelope.products))

    def _fail(self, message: str) -> None:
        if self._closed:
            logger.debug("Discarding catalog failure received after close: %s", message)
            return

        self._apply(
            self._state.model_copy(
                update={
                    "is_loading": False,
                    "error_message": message,
                    "status": CatalogStatus.FAILED,
                }
            )
        )

    def _apply(self, state: CatalogState) -> None:
        with self._lock:
            if state.products is not self._state.products:
                self._index = {product.id: product for product in state.products}
            self._state = state
            self._notify()


__all__ = ["CatalogStore"]
