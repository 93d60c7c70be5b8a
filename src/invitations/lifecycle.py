"""Invitation lifecycle: Draft -> Published <-> Draft, and Deleted (terminal).

Every owner operation checks ownership first. Public reads never reveal
whether a slug belongs to a draft or to nothing at all.
"""

import logging
from typing import Any
from uuid import UUID

from src.config.settings import settings
from src.errors import (
    FieldError,
    NotFoundError,
    StoredConfigError,
    UnauthorizedError,
    UnknownTemplateError,
    ValidationError,
)
from src.invitations import slugs
from src.invitations.config_schema import ValidatedConfig, merge_config, validate_config
from src.invitations.dtos import InvitationDTO, InvitationWithSummaryDTO, SlugAvailabilityDTO
from src.invitations.repository.read_models import InvitationReadModel
from src.invitations.repository.write_models import InvitationWriteModel
from src.models.base import utc_now
from src.rsvps.repository.read_models import RSVPReadModel

logger = logging.getLogger(__name__)


async def get_owned_invitation(
    read_model: InvitationReadModel, invitation_id: UUID, owner_id: str
) -> InvitationDTO:
    invitation = await read_model.get(invitation_id)
    if invitation is None:
        raise NotFoundError()
    if invitation.owner_id != owner_id:
        raise UnauthorizedError()
    return invitation


async def get_invitation_open_for_submissions(
    read_model: InvitationReadModel, invitation_id: UUID
) -> InvitationDTO:
    """Invitation that guests may RSVP to or sign the guestbook of."""
    invitation = await read_model.get(invitation_id)
    if invitation is None:
        raise NotFoundError()
    if settings.submissions_require_published and not invitation.is_published:
        raise NotFoundError()
    return invitation


def load_config(invitation: InvitationDTO) -> ValidatedConfig:
    """
    Typed view of a stored configuration.

    A document saved under older rules that fails today's schema raises
    StoredConfigError instead of a request validation error.
    """
    try:
        return validate_config(invitation.config, check_size=False)
    except ValidationError as e:
        logger.error(
            f"Stored config of invitation {invitation.id} fails validation: "
            f"{', '.join(e.fields())}"
        )
        raise StoredConfigError(invitation.id, e.errors) from e
    except UnknownTemplateError as e:
        logger.error(f"Stored config of invitation {invitation.id} is unusable: {e.message}")
        raise StoredConfigError(invitation.id) from e


class InvitationService:
    def __init__(
        self,
        read_model: InvitationReadModel,
        write_model: InvitationWriteModel,
        rsvp_read_model: RSVPReadModel,
    ):
        self.read_model = read_model
        self.write_model = write_model
        self.rsvp_read_model = rsvp_read_model

    async def create(
        self,
        owner_id: str,
        slug: str,
        config: Any,
        template: str | None = None,
        owner_email: str | None = None,
    ) -> InvitationDTO:
        """
        Create a Draft invitation.
        Slug format and configuration problems are reported together.
        """
        errors: list[FieldError] = slugs.validate_slug(slug)
        validated = None
        try:
            validated = validate_config(config, declared_template=template)
        except ValidationError as e:
            errors.extend(e.errors)
        if errors:
            raise ValidationError(errors)

        invitation = await self.write_model.create(
            owner_id=owner_id, slug=slug, config=validated.document, owner_email=owner_email
        )
        logger.info(f"Created invitation {invitation.id} ({slug}) for owner {owner_id}")
        return invitation

    async def publish(self, invitation_id: UUID, owner_id: str) -> InvitationDTO:
        invitation = await get_owned_invitation(self.read_model, invitation_id, owner_id)
        if invitation.is_published:
            return invitation

        updated = await self.write_model.update(
            invitation_id,
            is_published=True,
            published_at=invitation.published_at or utc_now(),
        )
        if updated is None:
            raise NotFoundError()
        logger.info(f"Published invitation {invitation_id} ({updated.slug})")
        return updated

    async def unpublish(self, invitation_id: UUID, owner_id: str) -> InvitationDTO:
        invitation = await get_owned_invitation(self.read_model, invitation_id, owner_id)
        if not invitation.is_published:
            return invitation

        updated = await self.write_model.update(invitation_id, is_published=False)
        if updated is None:
            raise NotFoundError()
        logger.info(f"Unpublished invitation {invitation_id} ({updated.slug})")
        return updated

    async def update(
        self,
        invitation_id: UUID,
        owner_id: str,
        partial_config: dict[str, Any] | None = None,
        slug: str | None = None,
        owner_email: str | None = None,
    ) -> InvitationDTO:
        """
        Deep-merge ``partial_config`` into the stored configuration and re-validate.
        The slug can only change while the invitation has never been published.
        A changed ``owner_email`` is recorded alongside.
        """
        invitation = await get_owned_invitation(self.read_model, invitation_id, owner_id)

        errors: list[FieldError] = []
        fields: dict[str, Any] = {}
        if slug is not None and slug != invitation.slug:
            if invitation.published_at is not None:
                errors.append(
                    FieldError("slug", "Slug cannot change once the invitation has been published")
                )
            else:
                errors.extend(slugs.validate_slug(slug))
            fields["slug"] = slug

        if partial_config is not None and not isinstance(partial_config, dict):
            errors.append(FieldError("config", "Configuration must be an object"))
        elif partial_config:
            try:
                validated = validate_config(merge_config(invitation.config, partial_config))
            except ValidationError as e:
                errors.extend(e.errors)
            else:
                fields["config"] = validated.document

        if owner_email is not None and owner_email != invitation.owner_email:
            fields["owner_email"] = owner_email

        if errors:
            raise ValidationError(errors)
        if not fields:
            return invitation

        updated = await self.write_model.update(invitation_id, **fields)
        if updated is None:
            raise NotFoundError()
        logger.info(f"Updated invitation {invitation_id}: {', '.join(sorted(fields))}")
        return updated

    async def delete(self, invitation_id: UUID, owner_id: str) -> None:
        await get_owned_invitation(self.read_model, invitation_id, owner_id)
        if not await self.write_model.delete(invitation_id):
            raise NotFoundError()
        logger.info(f"Deleted invitation {invitation_id} with its RSVPs and guestbook")

    async def get(self, invitation_id: UUID, owner_id: str) -> InvitationDTO:
        return await get_owned_invitation(self.read_model, invitation_id, owner_id)

    async def get_by_slug(self, slug: str) -> InvitationDTO:
        """Public read. Drafts look exactly like missing invitations."""
        invitation = await self.read_model.get_by_slug(slug)
        if invitation is None or not invitation.is_published:
            raise NotFoundError()
        return invitation

    async def list_owner_invitations(self, owner_id: str) -> list[InvitationWithSummaryDTO]:
        invitations = await self.read_model.list_by_owner(owner_id)
        summaries = await self.rsvp_read_model.summaries([inv.id for inv in invitations])
        return [
            InvitationWithSummaryDTO(invitation=inv, rsvp_summary=summaries[inv.id])
            for inv in invitations
        ]

    async def check_slug(self, slug: str) -> SlugAvailabilityDTO:
        """Advisory only: creation still relies on the store's unique constraint."""
        errors = slugs.validate_slug(slug)
        if errors:
            return SlugAvailabilityDTO(slug=slug, available=False, error=errors[0].message)
        if await self.read_model.slug_exists(slug):
            return SlugAvailabilityDTO(slug=slug, available=False, error="Slug is already taken")
        return SlugAvailabilityDTO(slug=slug, available=True)

    async def suggest_slug(self, bride_name: str, groom_name: str) -> str:
        return await slugs.suggest_slug(bride_name, groom_name, self.read_model.slug_exists)
