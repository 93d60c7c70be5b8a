"""FastAPI dependency providers shared by the feature routers.

Tests swap these out through ``app.dependency_overrides``.
"""

from fastapi import Header, HTTPException, status

from src.email_service import get_email_service
from src.guestbook.repository.read_models import SqlGuestbookReadModel
from src.guestbook.repository.write_models import SqlGuestbookWriteModel
from src.guestbook.service import GuestbookService
from src.invitations.lifecycle import InvitationService
from src.invitations.repository.read_models import SqlInvitationReadModel
from src.invitations.repository.write_models import SqlInvitationWriteModel
from src.rsvps.repository.read_models import SqlRSVPReadModel
from src.rsvps.repository.write_models import SqlRSVPWriteModel
from src.rsvps.service import RSVPService

OWNER_HEADER = "X-Owner-Id"
OWNER_EMAIL_HEADER = "X-Owner-Email"


async def get_owner_id(x_owner_id: str | None = Header(default=None)) -> str:
    """Identity of the authenticated creator, forwarded by the auth layer."""
    if not x_owner_id or not x_owner_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return x_owner_id.strip()


async def get_owner_email(x_owner_email: str | None = Header(default=None)) -> str | None:
    """Creator's email address, when the auth layer forwards it."""
    if x_owner_email is None or not x_owner_email.strip():
        return None
    return x_owner_email.strip()


def get_invitation_service() -> InvitationService:
    return InvitationService(
        read_model=SqlInvitationReadModel(),
        write_model=SqlInvitationWriteModel(),
        rsvp_read_model=SqlRSVPReadModel(),
    )


def get_rsvp_service() -> RSVPService:
    return RSVPService(
        invitation_read_model=SqlInvitationReadModel(),
        read_model=SqlRSVPReadModel(),
        write_model=SqlRSVPWriteModel(),
        email_service=get_email_service(),
    )


def get_guestbook_service() -> GuestbookService:
    return GuestbookService(
        invitation_read_model=SqlInvitationReadModel(),
        read_model=SqlGuestbookReadModel(),
        write_model=SqlGuestbookWriteModel(),
    )
