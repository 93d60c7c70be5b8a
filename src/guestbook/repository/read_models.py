import abc
from functools import partial
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager, store_errors
from src.guestbook.dtos import GuestbookEntryDTO
from src.guestbook.repository.orm_models import GuestbookEntry


def to_entry_dto(entry: GuestbookEntry) -> GuestbookEntryDTO:
    return GuestbookEntryDTO(
        id=entry.uuid,
        invitation_id=entry.invitation_id,
        name=entry.name,
        message=entry.message,
        created_at=entry.created_at,
    )


class GuestbookReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_recent(self, invitation_id: UUID, limit: int) -> list[GuestbookEntryDTO]:
        """List at most ``limit`` entries, newest first."""
        raise NotImplementedError


class SqlGuestbookReadModel(GuestbookReadModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None):
        self.session_overwrite = session_overwrite

    async def list_recent(self, invitation_id: UUID, limit: int) -> list[GuestbookEntryDTO]:
        with store_errors():
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                stmt = (
                    select(GuestbookEntry)
                    .where(GuestbookEntry.invitation_id == invitation_id)
                    .order_by(GuestbookEntry.created_at.desc())
                    .limit(limit)
                )
                result = await session.execute(stmt)
                return [to_entry_dto(row) for row in result.scalars().all()]
