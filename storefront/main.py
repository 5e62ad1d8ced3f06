import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .api import badges, cart, favorites, products
from .services.dependencies import get_catalog_store
from .services.errors import ProductNotFoundError
from .settings import AppSettings, settings
from .utils.error_responses import (
    build_internal_error_response,
    build_product_not_found_response,
    build_validation_error_response,
)
from .utils.request_context import (
    REQUEST_ID_HEADER,
    get_request_id,
    resolve_request_id,
    set_request_id,
)

# Configure logging
logging.basicConfig(
    level=settings.log_level_numeric,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _validate_environment(active_settings: AppSettings | None = None) -> None:
    """Log warnings for unset or suspicious optional configuration."""

    warnings = (active_settings or settings).optional_config_warnings()

    if warnings:
        logger.warning("=" * 60)
        logger.warning("Environment Configuration Warnings:")
        for warning in warnings:
            logger.warning(f"  • {warning}")
        logger.warning("=" * 60)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Kick off the initial catalog fetch and close the store on shutdown."""
    _validate_environment()

    catalog = get_catalog_store()

    logger.info("=" * 60)
    logger.info("Storefront API - Startup")
    logger.info("=" * 60)
    logger.info(f"Catalog endpoint: {settings.catalog_url}")
    logger.info(f"Catalog timeout: {settings.catalog_timeout_seconds}s")

    initial_refresh: asyncio.Task | None = None
    if settings.refresh_on_startup:
        # The fetch runs in the background so the API serves requests (showing
        # the loading state) while the catalog is still arriving.
        initial_refresh = asyncio.create_task(catalog.refresh())
    else:
        logger.info("REFRESH_ON_STARTUP disabled - catalog stays empty until refreshed")
    logger.info("=" * 60)

    yield

    logger.info("Shutting down Storefront API")
    await catalog.aclose()
    if initial_refresh is not None:
        await initial_refresh


app = FastAPI(
    title="Storefront API",
    version="0.1.0",
    description="Browse a remote product catalog, keep favorites, and fill a cart.",
    lifespan=lifespan,
    redirect_slashes=False,  # Disable automatic trailing slash redirects
)

if settings.cors_allow_origins:
    logger.info(
        "Configured CORS allow_origins: %s", ", ".join(settings.cors_allow_origins)
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# Middleware to add request ID to each request
@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Tag each request with a caller-supplied or generated ID for tracking."""
    request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
    set_request_id(request_id)
    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


# Exception handlers
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle FastAPI request validation errors."""
    error_response = build_validation_error_response(exc, path=str(request.url.path))

    logger.warning(
        "Validation error for request %s to %s: %s errors",
        get_request_id(),
        request.url.path,
        len(error_response.errors),
    )

    return JSONResponse(
        status_code=error_response.status_code,
        content=error_response.model_dump(mode="json"),
    )


@app.exception_handler(ValidationError)
async def pydantic_validation_exception_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors."""
    error_response = build_validation_error_response(
        exc, path=str(request.url.path), message="Data validation failed"
    )

    logger.warning(
        "Pydantic validation error for request %s to %s: %s errors",
        get_request_id(),
        request.url.path,
        len(error_response.errors),
    )

    return JSONResponse(
        status_code=error_response.status_code,
        content=error_response.model_dump(mode="json"),
    )


@app.exception_handler(ProductNotFoundError)
async def product_not_found_exception_handler(
    request: Request, exc: ProductNotFoundError
):
    """Handle references to products that are not in the loaded catalog."""
    logger.info(
        "Unknown product %s for request %s to %s",
        exc.product_id,
        get_request_id(),
        request.url.path,
    )

    error_response = build_product_not_found_response(exc, path=str(request.url.path))

    return JSONResponse(
        status_code=error_response.status_code,
        content=error_response.model_dump(mode="json"),
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Handle all other unhandled exceptions."""
    logger.exception(
        "Unhandled exception for request %s to %s: %s",
        get_request_id(),
        request.url.path,
        type(exc).__name__,
    )

    error_response = build_internal_error_response(exc, path=str(request.url.path))

    return JSONResponse(
        status_code=error_response.status_code,
        content=error_response.model_dump(mode="json"),
    )


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    """Simple health endpoint for readiness checks."""
    return {"status": "ok"}


app.include_router(products.router, prefix="/products", tags=["products"])
app.include_router(favorites.router, prefix="/favorites", tags=["favorites"])
app.include_router(cart.router, prefix="/cart", tags=["cart"])
app.include_router(badges.router, prefix="/badges", tags=["badges"])
