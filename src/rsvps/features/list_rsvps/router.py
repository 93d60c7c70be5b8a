from uuid import UUID

from fastapi import APIRouter, Depends

from src.dependencies import get_owner_id, get_rsvp_service
from src.rsvps.dtos import RSVPSummaryDTO
from src.rsvps.schemas import OwnerRSVPListResponse, RSVPResponse, RSVPSummaryResponse
from src.rsvps.service import RSVPService
from src.rsvps.urls import OWNER_RSVPS_URL

router = APIRouter()


@router.get(OWNER_RSVPS_URL, response_model=OwnerRSVPListResponse)
async def list_rsvps(
    invitation_id: UUID,
    owner_id: str = Depends(get_owner_id),
    service: RSVPService = Depends(get_rsvp_service),
) -> OwnerRSVPListResponse:
    """All RSVPs of the caller's invitation, newest first, with their summary."""
    rsvps = await service.list_for_owner(invitation_id, owner_id)
    return OwnerRSVPListResponse(
        summary=RSVPSummaryResponse.from_dto(RSVPSummaryDTO.from_rsvps(rsvps)),
        rsvps=[RSVPResponse.from_dto(rsvp) for rsvp in rsvps],
    )
