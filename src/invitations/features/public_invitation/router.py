from fastapi import APIRouter, Depends

from src.dependencies import get_invitation_service
from src.invitations.lifecycle import InvitationService, load_config
from src.invitations.schemas import PublicInvitationResponse
from src.invitations.urls import PUBLIC_INVITATION_URL
from src.rendering import render

router = APIRouter()


@router.get(PUBLIC_INVITATION_URL, response_model=PublicInvitationResponse)
async def get_public_invitation(
    slug: str,
    service: InvitationService = Depends(get_invitation_service),
) -> PublicInvitationResponse:
    """
    Published invitation by slug, with its sections in template order.
    Drafts answer exactly like unknown slugs.
    """
    invitation = await service.get_by_slug(slug)
    document = render(load_config(invitation))
    return PublicInvitationResponse.build(invitation, document)
