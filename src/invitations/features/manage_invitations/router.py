from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from src.dependencies import get_invitation_service, get_owner_email, get_owner_id
from src.invitations.lifecycle import InvitationService
from src.invitations.schemas import (
    CreateInvitationRequest,
    InvitationListItem,
    InvitationResponse,
    UpdateInvitationRequest,
)
from src.invitations.urls import (
    INVITATION_URL,
    INVITATIONS_URL,
    PUBLISH_INVITATION_URL,
    UNPUBLISH_INVITATION_URL,
)

router = APIRouter()


@router.post(
    INVITATIONS_URL, response_model=InvitationResponse, status_code=status.HTTP_201_CREATED
)
async def create_invitation(
    request: CreateInvitationRequest,
    owner_id: str = Depends(get_owner_id),
    owner_email: str | None = Depends(get_owner_email),
    service: InvitationService = Depends(get_invitation_service),
) -> InvitationResponse:
    """Create a draft invitation."""
    invitation = await service.create(
        owner_id=owner_id,
        slug=request.slug,
        config=request.config,
        template=request.template,
        owner_email=owner_email,
    )
    return InvitationResponse.from_dto(invitation)


@router.get(INVITATIONS_URL, response_model=list[InvitationListItem])
async def list_invitations(
    owner_id: str = Depends(get_owner_id),
    service: InvitationService = Depends(get_invitation_service),
) -> list[InvitationListItem]:
    """The caller's invitations, newest first, each with its RSVP summary."""
    items = await service.list_owner_invitations(owner_id)
    return [InvitationListItem.from_summary_dto(item) for item in items]


@router.get(INVITATION_URL, response_model=InvitationResponse)
async def get_invitation(
    invitation_id: UUID,
    owner_id: str = Depends(get_owner_id),
    service: InvitationService = Depends(get_invitation_service),
) -> InvitationResponse:
    invitation = await service.get(invitation_id, owner_id)
    return InvitationResponse.from_dto(invitation)


@router.patch(INVITATION_URL, response_model=InvitationResponse)
async def update_invitation(
    invitation_id: UUID,
    request: UpdateInvitationRequest,
    owner_id: str = Depends(get_owner_id),
    owner_email: str | None = Depends(get_owner_email),
    service: InvitationService = Depends(get_invitation_service),
) -> InvitationResponse:
    """Merge a partial configuration and/or rename a never-published invitation."""
    invitation = await service.update(
        invitation_id,
        owner_id,
        partial_config=request.config,
        slug=request.slug,
        owner_email=owner_email,
    )
    return InvitationResponse.from_dto(invitation)


@router.delete(INVITATION_URL, status_code=status.HTTP_204_NO_CONTENT)
async def delete_invitation(
    invitation_id: UUID,
    owner_id: str = Depends(get_owner_id),
    service: InvitationService = Depends(get_invitation_service),
) -> Response:
    """Delete the invitation together with its RSVPs and guestbook entries."""
    await service.delete(invitation_id, owner_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(PUBLISH_INVITATION_URL, response_model=InvitationResponse)
async def publish_invitation(
    invitation_id: UUID,
    owner_id: str = Depends(get_owner_id),
    service: InvitationService = Depends(get_invitation_service),
) -> InvitationResponse:
    invitation = await service.publish(invitation_id, owner_id)
    return InvitationResponse.from_dto(invitation)


@router.post(UNPUBLISH_INVITATION_URL, response_model=InvitationResponse)
async def unpublish_invitation(
    invitation_id: UUID,
    owner_id: str = Depends(get_owner_id),
    service: InvitationService = Depends(get_invitation_service),
) -> InvitationResponse:
    invitation = await service.unpublish(invitation_id, owner_id)
    return InvitationResponse.from_dto(invitation)
