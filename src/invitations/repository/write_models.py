"""Invitation write models - return DTOs, never ORM models."""

import logging
from abc import ABC, abstractmethod
from functools import partial
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager, store_errors
from src.errors import SlugTakenError
from src.guestbook.repository.orm_models import GuestbookEntry
from src.invitations.dtos import InvitationDTO
from src.invitations.repository.orm_models import Invitation
from src.invitations.repository.read_models import to_invitation_dto
from src.rsvps.repository.orm_models import RSVP

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"slug", "config", "is_published", "published_at", "owner_email"})


class InvitationWriteModel(ABC):
    @abstractmethod
    async def create(
        self,
        owner_id: str,
        slug: str,
        config: dict[str, Any],
        owner_email: str | None = None,
    ) -> InvitationDTO:
        """
        Insert a draft invitation.
        Raises SlugTakenError when the slug is already stored.
        """
        raise NotImplementedError

    @abstractmethod
    async def update(self, invitation_id: UUID, **fields: Any) -> InvitationDTO | None:
        """
        Update any of UPDATABLE_FIELDS.
        Returns None when the invitation does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, invitation_id: UUID) -> bool:
        """Delete the invitation with its RSVPs and guestbook entries, all or nothing."""
        raise NotImplementedError


class SqlInvitationWriteModel(InvitationWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None):
        self.session_overwrite = session_overwrite

    async def create(
        self,
        owner_id: str,
        slug: str,
        config: dict[str, Any],
        owner_email: str | None = None,
    ) -> InvitationDTO:
        with store_errors():
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                invitation = Invitation(
                    owner_id=owner_id,
                    owner_email=owner_email,
                    slug=slug,
                    config=config,
                    is_published=False,
                )
                session.add(invitation)
                try:
                    await session.flush()
                except IntegrityError as e:
                    logger.info(f"Slug conflict on create: {slug}")
                    raise SlugTakenError(slug) from e
                return to_invitation_dto(invitation)

    async def update(self, invitation_id: UUID, **fields: Any) -> InvitationDTO | None:
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        with store_errors():
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                result = await session.execute(
                    select(Invitation).where(Invitation.uuid == invitation_id)
                )
                invitation = result.scalar_one_or_none()
                if not invitation:
                    return None

                for name, value in fields.items():
                    setattr(invitation, name, value)
                slug = invitation.slug
                try:
                    await session.flush()
                except IntegrityError as e:
                    logger.info(f"Slug conflict on update: {slug}")
                    raise SlugTakenError(slug) from e
                await session.refresh(invitation)
                return to_invitation_dto(invitation)

    async def delete(self, invitation_id: UUID) -> bool:
        with store_errors():
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                await session.execute(delete(RSVP).where(RSVP.invitation_id == invitation_id))
                await session.execute(
                    delete(GuestbookEntry).where(GuestbookEntry.invitation_id == invitation_id)
                )
                result = await session.execute(
                    delete(Invitation).where(Invitation.uuid == invitation_id)
                )
                return result.rowcount > 0
