import logging
from uuid import UUID

from src.errors import FieldError, ValidationError
from src.guestbook.dtos import (
    GUESTBOOK_LIST_MAX_LIMIT,
    GUESTBOOK_MESSAGE_MAX_LENGTH,
    GUESTBOOK_NAME_MAX_LENGTH,
    GuestbookEntryDTO,
)
from src.guestbook.repository.read_models import GuestbookReadModel
from src.guestbook.repository.write_models import GuestbookWriteModel
from src.invitations.lifecycle import get_invitation_open_for_submissions
from src.invitations.repository.read_models import InvitationReadModel

logger = logging.getLogger(__name__)


def _check_length(field: str, value: str, max_length: int) -> list[FieldError]:
    if not value:
        return [FieldError(field, f"{field.capitalize()} is required")]
    if len(value) > max_length:
        return [FieldError(field, f"{field.capitalize()} must be {max_length} characters or less")]
    return []


class GuestbookService:
    def __init__(
        self,
        invitation_read_model: InvitationReadModel,
        read_model: GuestbookReadModel,
        write_model: GuestbookWriteModel,
    ):
        self.invitation_read_model = invitation_read_model
        self.read_model = read_model
        self.write_model = write_model

    async def post(self, invitation_id: UUID, name: str, message: str) -> GuestbookEntryDTO:
        """Sign the guestbook. Name and message are stored trimmed."""
        name = (name or "").strip()
        message = (message or "").strip()
        errors = _check_length("name", name, GUESTBOOK_NAME_MAX_LENGTH)
        errors += _check_length("message", message, GUESTBOOK_MESSAGE_MAX_LENGTH)
        if errors:
            raise ValidationError(errors)

        invitation = await get_invitation_open_for_submissions(
            self.invitation_read_model, invitation_id
        )
        entry = await self.write_model.add(invitation_id=invitation.id, name=name, message=message)
        logger.info(f"Accepted guestbook entry {entry.id} for invitation {invitation.id}")
        return entry

    async def list(
        self, invitation_id: UUID, limit: int = GUESTBOOK_LIST_MAX_LIMIT
    ) -> list[GuestbookEntryDTO]:
        """Most recent entries first."""
        if not 1 <= limit <= GUESTBOOK_LIST_MAX_LIMIT:
            raise ValidationError.single(
                "limit", f"Limit must be between 1 and {GUESTBOOK_LIST_MAX_LIMIT}"
            )
        invitation = await get_invitation_open_for_submissions(
            self.invitation_read_model, invitation_id
        )
        return await self.read_model.list_recent(invitation.id, limit)
