"""Invitation read models - return DTOs, never ORM models."""

import abc
from functools import partial
from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager, store_errors
from src.invitations.dtos import InvitationDTO
from src.invitations.repository.orm_models import Invitation


def to_invitation_dto(invitation: Invitation) -> InvitationDTO:
    return InvitationDTO(
        id=invitation.uuid,
        owner_id=invitation.owner_id,
        slug=invitation.slug,
        config=invitation.config,
        is_published=invitation.is_published,
        created_at=invitation.created_at,
        updated_at=invitation.updated_at,
        published_at=invitation.published_at,
        owner_email=invitation.owner_email,
    )


class InvitationReadModel(abc.ABC):
    @abc.abstractmethod
    async def get(self, invitation_id: UUID) -> InvitationDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_by_slug(self, slug: str) -> InvitationDTO | None:
        """Get an invitation by slug, published or not. Callers decide visibility."""
        raise NotImplementedError

    @abc.abstractmethod
    async def list_by_owner(self, owner_id: str) -> list[InvitationDTO]:
        """List the owner's invitations, newest first."""
        raise NotImplementedError

    @abc.abstractmethod
    async def slug_exists(self, slug: str) -> bool:
        raise NotImplementedError


class SqlInvitationReadModel(InvitationReadModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None):
        self.session_overwrite = session_overwrite

    async def _get_one(self, *criteria) -> InvitationDTO | None:
        with store_errors():
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                result = await session.execute(select(Invitation).where(*criteria))
                invitation = result.scalar_one_or_none()
                return to_invitation_dto(invitation) if invitation else None

    async def get(self, invitation_id: UUID) -> InvitationDTO | None:
        return await self._get_one(Invitation.uuid == invitation_id)

    async def get_by_slug(self, slug: str) -> InvitationDTO | None:
        return await self._get_one(Invitation.slug == slug)

    async def list_by_owner(self, owner_id: str) -> list[InvitationDTO]:
        with store_errors():
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                stmt = (
                    select(Invitation)
                    .where(Invitation.owner_id == owner_id)
                    .order_by(Invitation.created_at.desc())
                )
                result = await session.execute(stmt)
                return [to_invitation_dto(row) for row in result.scalars().all()]

    async def slug_exists(self, slug: str) -> bool:
        with store_errors():
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                result = await session.execute(select(exists().where(Invitation.slug == slug)))
                return bool(result.scalar())
