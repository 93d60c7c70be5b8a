from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from src.guestbook.dtos import GuestbookEntryDTO


class GuestbookEntryRequest(BaseModel):
    name: str
    message: str


class GuestbookEntryResponse(BaseModel):
    id: UUID
    name: str
    message: str
    created_at: datetime

    @classmethod
    def from_dto(cls, entry: GuestbookEntryDTO) -> "GuestbookEntryResponse":
        return cls(id=entry.id, name=entry.name, message=entry.message, created_at=entry.created_at)
