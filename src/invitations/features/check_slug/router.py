from fastapi import APIRouter, Depends, Query

from src.dependencies import get_invitation_service, get_owner_id
from src.invitations.lifecycle import InvitationService
from src.invitations.schemas import SlugAvailabilityResponse, SlugSuggestionResponse
from src.invitations.urls import CHECK_SLUG_URL, SUGGEST_SLUG_URL

router = APIRouter()


@router.get(CHECK_SLUG_URL, response_model=SlugAvailabilityResponse)
async def check_slug(
    slug: str = Query(...),
    owner_id: str = Depends(get_owner_id),
    service: InvitationService = Depends(get_invitation_service),
) -> SlugAvailabilityResponse:
    """
    Advisory availability check.
    A slug reported as available can still be taken before the invitation is created.
    """
    availability = await service.check_slug(slug)
    return SlugAvailabilityResponse(
        slug=availability.slug,
        available=availability.available,
        error=availability.error,
    )


@router.get(SUGGEST_SLUG_URL, response_model=SlugSuggestionResponse)
async def suggest_slug(
    bride: str = Query(..., min_length=1),
    groom: str = Query(..., min_length=1),
    owner_id: str = Depends(get_owner_id),
    service: InvitationService = Depends(get_invitation_service),
) -> SlugSuggestionResponse:
    return SlugSuggestionResponse(slug=await service.suggest_slug(bride, groom))
