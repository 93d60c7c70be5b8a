"""RSVP read models - return DTOs, never ORM models."""

import abc
from functools import partial
from uuid import UUID

from sqlalchemy import Integer, case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager, store_errors
from src.rsvps.dtos import RSVPDTO, RSVPSummaryDTO
from src.rsvps.repository.orm_models import RSVP


def to_rsvp_dto(rsvp: RSVP) -> RSVPDTO:
    return RSVPDTO(
        id=rsvp.uuid,
        invitation_id=rsvp.invitation_id,
        name=rsvp.name,
        email=rsvp.email,
        phone=rsvp.phone,
        attendance=rsvp.attendance,
        guest_count=rsvp.guest_count,
        message=rsvp.message,
        created_at=rsvp.created_at,
    )


class RSVPReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_for_invitation(self, invitation_id: UUID) -> list[RSVPDTO]:
        """List every RSVP of an invitation, newest first."""
        raise NotImplementedError

    @abc.abstractmethod
    async def summaries(self, invitation_ids: list[UUID]) -> dict[UUID, RSVPSummaryDTO]:
        """
        Count responses per invitation.
        Invitations without RSVPs map to an empty summary.
        """
        raise NotImplementedError

    async def summary(self, invitation_id: UUID) -> RSVPSummaryDTO:
        return (await self.summaries([invitation_id]))[invitation_id]


class SqlRSVPReadModel(RSVPReadModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None):
        self.session_overwrite = session_overwrite

    async def list_for_invitation(self, invitation_id: UUID) -> list[RSVPDTO]:
        with store_errors():
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                stmt = (
                    select(RSVP)
                    .where(RSVP.invitation_id == invitation_id)
                    .order_by(RSVP.created_at.desc())
                )
                result = await session.execute(stmt)
                return [to_rsvp_dto(row) for row in result.scalars().all()]

    async def summaries(self, invitation_ids: list[UUID]) -> dict[UUID, RSVPSummaryDTO]:
        summaries = {invitation_id: RSVPSummaryDTO() for invitation_id in invitation_ids}
        if not invitation_ids:
            return summaries

        attending = case((RSVP.attendance.is_(True), 1), else_=0)
        guests = case((RSVP.attendance.is_(True), func.coalesce(RSVP.guest_count, 0)), else_=0)
        stmt = (
            select(
                RSVP.invitation_id,
                func.count(RSVP.uuid),
                func.sum(attending, type_=Integer),
                func.sum(guests, type_=Integer),
            )
            .where(RSVP.invitation_id.in_(invitation_ids))
            .group_by(RSVP.invitation_id)
        )
        with store_errors():
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                result = await session.execute(stmt)
                for invitation_id, total, attending_count, guest_total in result.all():
                    attending_count = int(attending_count or 0)
                    summaries[invitation_id] = RSVPSummaryDTO(
                        total_responses=int(total),
                        attending=attending_count,
                        declined=int(total) - attending_count,
                        total_guests=int(guest_total or 0),
                    )
        return summaries
