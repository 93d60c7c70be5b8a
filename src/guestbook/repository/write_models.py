from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager, store_errors
from src.guestbook.dtos import GuestbookEntryDTO
from src.guestbook.repository.orm_models import GuestbookEntry
from src.guestbook.repository.read_models import to_entry_dto


class GuestbookWriteModel(ABC):
    @abstractmethod
    async def add(self, invitation_id: UUID, name: str, message: str) -> GuestbookEntryDTO:
        raise NotImplementedError


class SqlGuestbookWriteModel(GuestbookWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None):
        self.session_overwrite = session_overwrite

    async def add(self, invitation_id: UUID, name: str, message: str) -> GuestbookEntryDTO:
        with store_errors():
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                entry = GuestbookEntry(invitation_id=invitation_id, name=name, message=message)
                session.add(entry)
                await session.flush()
                return to_entry_dto(entry)
