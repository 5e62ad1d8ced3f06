"""FastAPI router exposing the shopping cart."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from storefront.schemas.cart import CartItemCreate, CartSummary, MembershipResponse
from storefront.services.cart_store import CartStore
from storefront.services.dependencies import get_cart_store, get_presentation_service
from storefront.services.presentation_service import StorefrontPresentationService

router = APIRouter()


@router.get("/", response_model=CartSummary)
async def get_cart(cart: CartStore = Depends(get_cart_store)) -> CartSummary:
    """Return cart items with count, subtotal, and total."""

    return cart.summary()


@router.post("/items", response_model=CartSummary)
async def add_cart_item(
    payload: CartItemCreate,
    cart: CartStore = Depends(get_cart_store),
    service: StorefrontPresentationService = Depends(get_presentation_service),
) -> CartSummary:
    """Add a catalog product; adding one that is already present is a no-op."""

    cart.add(service.require_product(payload.product_id))
    return cart.summary()


@router.get("/items/{product_id}", response_model=MembershipResponse)
async def cart_contains(
    product_id: int,
    cart: CartStore = Depends(get_cart_store),
    service: StorefrontPresentationService = Depends(get_presentation_service),
) -> MembershipResponse:
    product = service.require_product(product_id)
    return MembershipResponse(product_id=product_id, present=cart.contains(product))


@router.delete("/items/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_cart_item(
    product_id: int,
    cart: CartStore = Depends(get_cart_store),
) -> Response:
    """Remove a product from the cart; absent products are ignored."""

    for item in cart.items:
        if item.id == product_id:
            cart.remove(item)
            break
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/checkout",
    response_model=CartSummary,
    status_code=status.HTTP_202_ACCEPTED,
)
async def checkout(cart: CartStore = Depends(get_cart_store)) -> CartSummary:
    """Accept a checkout request without processing it; the cart is unchanged."""

    return cart.summary()
