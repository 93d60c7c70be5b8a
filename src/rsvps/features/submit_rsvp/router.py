from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.dependencies import get_rsvp_service
from src.rsvps.schemas import RSVPResponse, SubmitRSVPResponse
from src.rsvps.service import RSVPService, RSVPSubmission
from src.rsvps.urls import SUBMIT_RSVP_URL

router = APIRouter()


@router.post(
    SUBMIT_RSVP_URL, response_model=SubmitRSVPResponse, status_code=status.HTTP_201_CREATED
)
async def submit_rsvp(
    invitation_id: UUID,
    submission: RSVPSubmission,
    service: RSVPService = Depends(get_rsvp_service),
) -> SubmitRSVPResponse:
    """
    Submit an RSVP for an invitation.
    Every submission is stored; a guest changing their mind submits again.
    """
    rsvp = await service.submit(invitation_id, submission)
    message = (
        "Thank you for confirming your attendance!"
        if rsvp.attendance
        else "We're sorry you can't make it. Your response has been recorded."
    )
    return SubmitRSVPResponse(message=message, rsvp=RSVPResponse.from_dto(rsvp))
