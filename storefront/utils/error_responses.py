"""Builders turning storefront failures into structured error bodies.

Each builder takes the exception being handled and the request path, and
derives the category, message, and status code itself. Handlers in
:mod:`storefront.main` only log and wrap the result in a ``JSONResponse``.
"""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from storefront.schemas.error import (
    ErrorResponse,
    ErrorType,
    ValidationErrorDetail,
    ValidationErrorResponse,
)
from storefront.services.errors import ProductNotFoundError
from storefront.utils.request_context import get_request_id

__all__ = [
    "INTERNAL_ERROR_RETRY_AFTER_SECONDS",
    "build_internal_error_response",
    "build_product_not_found_response",
    "build_validation_error_response",
    "validation_details",
]

INTERNAL_ERROR_RETRY_AFTER_SECONDS = 5


def _current_timestamp() -> datetime:
    """Return the timestamp stamped on error payloads (patched in tests)."""

    return datetime.now(UTC)


def validation_details(
    exc: RequestValidationError | ValidationError,
) -> list[ValidationErrorDetail]:
    """Flatten pydantic/FastAPI error entries into dotted field paths."""

    return [
        ValidationErrorDetail(
            field=".".join(str(loc) for loc in error["loc"]),
            message=error["msg"],
            value=error.get("input"),
        )
        for error in exc.errors()
    ]


def build_validation_error_response(
    exc: RequestValidationError | ValidationError,
    *,
    path: str,
    message: str = "Request validation failed",
) -> ValidationErrorResponse:
    """Describe every offending field of a rejected request body or parameter."""

    errors = validation_details(exc)
    return ValidationErrorResponse(
        error_type=ErrorType.VALIDATION_ERROR,
        message=message,
        detail=f"{len(errors)} validation error(s)",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        timestamp=_current_timestamp(),
        request_id=get_request_id(),
        path=path,
        errors=errors,
    )


def build_product_not_found_response(
    exc: ProductNotFoundError, *, path: str
) -> ErrorResponse:
    return ErrorResponse(
        error_type=ErrorType.NOT_FOUND,
        message="Product not found",
        detail=str(exc),
        status_code=status.HTTP_404_NOT_FOUND,
        timestamp=_current_timestamp(),
        request_id=get_request_id(),
        path=path,
    )


def build_internal_error_response(exc: Exception, *, path: str) -> ErrorResponse:
    """Report an unexpected failure by exception type only, with a retry hint."""

    return ErrorResponse(
        error_type=ErrorType.INTERNAL_ERROR,
        message="Internal server error",
        detail=f"An unexpected error occurred: {type(exc).__name__}",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        timestamp=_current_timestamp(),
        request_id=get_request_id(),
        path=path,
        retry_after=INTERNAL_ERROR_RETRY_AFTER_SECONDS,
    )
