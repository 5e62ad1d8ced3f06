"""Request-scoped identifier shared by middleware, handlers, and logs.

The middleware in :mod:`storefront.main` resolves an identifier for every
inbound call, echoes it in the ``X-Request-ID`` response header, and error
payloads carry it too, so a failed cart or favorites call can be matched with
its log lines. A caller may supply its own identifier through the same header.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

__all__ = [
    "MAX_REQUEST_ID_LENGTH",
    "REQUEST_ID_CONTEXT",
    "REQUEST_ID_HEADER",
    "clear_request_id",
    "get_request_id",
    "resolve_request_id",
    "set_request_id",
]

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 128

REQUEST_ID_CONTEXT: ContextVar[str] = ContextVar("request_id", default="")


def resolve_request_id(candidate: str | None) -> str:
    """Return ``candidate`` when it is a usable identifier, else a fresh UUID.

    Client-supplied values are accepted only when they are non-blank printable
    ASCII no longer than :data:`MAX_REQUEST_ID_LENGTH`, which keeps them safe
    to echo into headers and log lines.
    """

    if candidate:
        candidate = candidate.strip()
        if (
            candidate
            and len(candidate) <= MAX_REQUEST_ID_LENGTH
            and candidate.isascii()
            and candidate.isprintable()
        ):
            return candidate
    return str(uuid.uuid4())


def set_request_id(request_id: str) -> Token[str]:
    return REQUEST_ID_CONTEXT.set(request_id)


def get_request_id() -> str:
    """Return the active request identifier, or ``""`` outside a request."""

    return REQUEST_ID_CONTEXT.get()


def clear_request_id(token: Token[str] | None = None) -> None:
    if token is not None:
        REQUEST_ID_CONTEXT.reset(token)
    else:
        REQUEST_ID_CONTEXT.set("")
