"""RSVP write models - return DTOs, never ORM models."""

from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager, store_errors
from src.rsvps.dtos import RSVPDTO
from src.rsvps.repository.orm_models import RSVP
from src.rsvps.repository.read_models import to_rsvp_dto


class RSVPWriteModel(ABC):
    @abstractmethod
    async def add(
        self,
        invitation_id: UUID,
        name: str,
        email: str,
        attendance: bool,
        phone: str | None = None,
        guest_count: int | None = None,
        message: str | None = None,
    ) -> RSVPDTO:
        """Append an RSVP. Repeated submissions are kept as separate rows."""
        raise NotImplementedError


class SqlRSVPWriteModel(RSVPWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None):
        self.session_overwrite = session_overwrite

    async def add(
        self,
        invitation_id: UUID,
        name: str,
        email: str,
        attendance: bool,
        phone: str | None = None,
        guest_count: int | None = None,
        message: str | None = None,
    ) -> RSVPDTO:
        with store_errors():
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                rsvp = RSVP(
                    invitation_id=invitation_id,
                    name=name,
                    email=email,
                    phone=phone,
                    attendance=attendance,
                    guest_count=guest_count,
                    message=message,
                )
                session.add(rsvp)
                await session.flush()
                return to_rsvp_dto(rsvp)
