from fastapi import APIRouter, Depends

from storefront.schemas.cart import BadgeCounts
from storefront.services.dependencies import get_presentation_service
from storefront.services.presentation_service import StorefrontPresentationService

router = APIRouter()


@router.get("/", response_model=BadgeCounts)
async def get_badges(
    service: StorefrontPresentationService = Depends(get_presentation_service),
) -> BadgeCounts:
    """Counts shown on the cart and favorites tab badges."""

    return service.badges()
