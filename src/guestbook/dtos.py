from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

GUESTBOOK_NAME_MAX_LENGTH = 100
GUESTBOOK_MESSAGE_MAX_LENGTH = 500
GUESTBOOK_LIST_MAX_LIMIT = 50


@dataclass(frozen=True)
class GuestbookEntryDTO:
    """DTO for a guestbook message."""

    id: UUID
    invitation_id: UUID
    name: str
    message: str
    created_at: datetime
