import logging
from typing import Annotated, Any
from uuid import UUID

from pydantic import (
    BaseModel,
    EmailStr,
    Field,
    StrictBool,
    StrictInt,
    StringConstraints,
    ValidationInfo,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from src.config.settings import settings
from src.email_service.base import EmailServiceBase
from src.email_service.templates import Language
from src.errors import ValidationError, field_errors_from_pydantic
from src.invitations.dtos import InvitationDTO
from src.invitations.lifecycle import (
    get_invitation_open_for_submissions,
    get_owned_invitation,
    load_config,
)
from src.invitations.repository.read_models import InvitationReadModel
from src.rsvps.dtos import RSVPDTO, RSVPSummaryDTO
from src.rsvps.repository.read_models import RSVPReadModel
from src.rsvps.repository.write_models import RSVPWriteModel

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 100
PHONE_MAX_LENGTH = 50
MESSAGE_MAX_LENGTH = 500
GUEST_COUNT_MIN = 1
GUEST_COUNT_MAX = 10


class RSVPSubmission(BaseModel):
    """A guest's answer. Anonymous and never deduplicated."""

    name: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1, max_length=NAME_MAX_LENGTH)
    ]
    email: EmailStr
    phone: Annotated[str, StringConstraints(max_length=PHONE_MAX_LENGTH)] | None = None
    attendance: StrictBool
    # Only meaningful when attending; validate_default so a missing count is caught
    guest_count: StrictInt | None = Field(default=None, validate_default=True)
    message: Annotated[str, StringConstraints(max_length=MESSAGE_MAX_LENGTH)] | None = None

    @field_validator("guest_count", mode="before")
    @classmethod
    def drop_guest_count_when_declined(cls, value: Any, info: ValidationInfo) -> Any:
        if info.data.get("attendance") is not True:
            return None
        return value

    @field_validator("guest_count")
    @classmethod
    def check_guest_count(cls, value: int | None, info: ValidationInfo) -> int | None:
        if info.data.get("attendance") is not True:
            return None
        if value is None:
            raise ValueError("Guest count is required when attending")
        if not GUEST_COUNT_MIN <= value <= GUEST_COUNT_MAX:
            raise ValueError(f"Guest count must be between {GUEST_COUNT_MIN} and {GUEST_COUNT_MAX}")
        return value

    @classmethod
    def parse(cls, data: Any) -> "RSVPSubmission":
        """Validate raw data, reporting every failing field as a ValidationError."""
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(field_errors_from_pydantic(e, root="rsvp"))


def invitation_url(invitation: InvitationDTO) -> str:
    return f"{settings.frontend_url.rstrip('/')}/{invitation.slug}"


def invitation_language(invitation: InvitationDTO) -> Language:
    try:
        return Language(invitation.config.get("language", Language.EN.value))
    except ValueError:
        return Language.EN


class RSVPService:
    def __init__(
        self,
        invitation_read_model: InvitationReadModel,
        read_model: RSVPReadModel,
        write_model: RSVPWriteModel,
        email_service: EmailServiceBase | None = None,
    ):
        self.invitation_read_model = invitation_read_model
        self.read_model = read_model
        self.write_model = write_model
        self.email_service = email_service

    async def submit(self, invitation_id: UUID, submission: RSVPSubmission) -> RSVPDTO:
        invitation = await get_invitation_open_for_submissions(
            self.invitation_read_model, invitation_id
        )
        rsvp = await self.write_model.add(
            invitation_id=invitation.id,
            name=submission.name,
            email=str(submission.email),
            phone=submission.phone,
            attendance=submission.attendance,
            guest_count=submission.guest_count if submission.attendance else None,
            message=submission.message,
        )
        logger.info(
            f"Accepted RSVP {rsvp.id} for invitation {invitation.id} "
            f"(attending={rsvp.attendance}, guests={rsvp.guest_count})"
        )
        await self._notify_host(invitation, rsvp)
        await self._send_confirmation(invitation, rsvp)
        return rsvp

    async def _notify_host(self, invitation: InvitationDTO, rsvp: RSVPDTO) -> None:
        if self.email_service is None or not invitation.owner_email:
            return
        try:
            await self.email_service.send_rsvp_notification(
                to_address=invitation.owner_email,
                guest_name=rsvp.name,
                guest_email=rsvp.email,
                guest_phone=rsvp.phone,
                attending=rsvp.attendance,
                guest_count=rsvp.guest_count,
                message=rsvp.message,
                couple_names=load_config(invitation).model.couple_names,
                invitation_url=invitation_url(invitation),
                language=invitation_language(invitation),
            )
        except Exception as e:
            logger.warning(f"Failed to notify host of RSVP {rsvp.id}: {e}")

    async def _send_confirmation(self, invitation: InvitationDTO, rsvp: RSVPDTO) -> None:
        if self.email_service is None:
            return
        try:
            await self.email_service.send_rsvp_confirmation(
                to_address=rsvp.email,
                guest_name=rsvp.name,
                couple_names=load_config(invitation).model.couple_names,
                attending=rsvp.attendance,
                guest_count=rsvp.guest_count,
                invitation_url=invitation_url(invitation),
                language=invitation_language(invitation),
            )
        except Exception as e:
            logger.warning(f"Failed to send RSVP confirmation for {rsvp.id}: {e}")

    async def summary(self, invitation_id: UUID) -> RSVPSummaryDTO:
        return await self.read_model.summary(invitation_id)

    async def list_for_owner(self, invitation_id: UUID, owner_id: str) -> list[RSVPDTO]:
        await get_owned_invitation(self.invitation_read_model, invitation_id, owner_id)
        return await self.read_model.list_for_invitation(invitation_id)
