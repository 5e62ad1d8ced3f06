"""Observable base shared by the catalog, cart, and favorites stores.

Consumers register listeners with :meth:`ObservableStore.subscribe` and receive
an immutable snapshot after every state change. Mutation and notification
both happen under the store's re-entrant lock, so listeners see changes in the
order they were applied and may read the store from inside the callback.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

SnapshotT = TypeVar("SnapshotT")

Listener = Callable[[SnapshotT], None]
Unsubscribe = Callable[[], None]


class ObservableStore(Generic[SnapshotT]):
    """Single-writer state holder with a subscribe/notify contract."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._listeners: list[Listener[SnapshotT]] = []

    def snapshot(self) -> SnapshotT:
        """Return an immutable view of the current state."""

        raise NotImplementedError

    def subscribe(self, listener: Listener[SnapshotT]) -> Unsubscribe:
        """Register ``listener`` and return a callable that removes it again."""

        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    def _notify(self) -> None:
        """Deliver the current snapshot to every listener.

        Callers must hold ``self._lock``. A failing listener is logged and
        skipped; it never aborts the mutation that triggered it.
        """

        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception(
                    "Listener %r raised while handling a %s update",
                    listener,
                    type(self).__name__,
                )


__all__ = ["Listener", "ObservableStore", "Unsubscribe"]
