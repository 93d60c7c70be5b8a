from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from src.invitations.dtos import InvitationDTO, InvitationStatus, InvitationWithSummaryDTO
from src.rendering import RenderableDocument
from src.rsvps.schemas import RSVPSummaryResponse


class CreateInvitationRequest(BaseModel):
    slug: str
    config: dict[str, Any]
    template: str | None = None


class UpdateInvitationRequest(BaseModel):
    slug: str | None = None
    config: dict[str, Any] | None = None


class InvitationResponse(BaseModel):
    id: UUID
    slug: str
    template: str | None
    status: InvitationStatus
    is_published: bool
    config: dict[str, Any]
    created_at: datetime
    updated_at: datetime
    published_at: datetime | None
    owner_email: str | None = None

    @classmethod
    def from_dto(cls, invitation: InvitationDTO) -> "InvitationResponse":
        return cls(
            id=invitation.id,
            slug=invitation.slug,
            template=invitation.template,
            status=invitation.status,
            is_published=invitation.is_published,
            config=invitation.config,
            created_at=invitation.created_at,
            updated_at=invitation.updated_at,
            published_at=invitation.published_at,
            owner_email=invitation.owner_email,
        )


class InvitationListItem(InvitationResponse):
    rsvp_summary: RSVPSummaryResponse

    @classmethod
    def from_summary_dto(cls, item: InvitationWithSummaryDTO) -> "InvitationListItem":
        base = InvitationResponse.from_dto(item.invitation)
        return cls(
            **base.model_dump(),
            rsvp_summary=RSVPSummaryResponse.from_dto(item.rsvp_summary),
        )


class SlugAvailabilityResponse(BaseModel):
    slug: str
    available: bool
    error: str | None = None


class SlugSuggestionResponse(BaseModel):
    slug: str


class SectionResponse(BaseModel):
    name: str
    data: dict[str, Any]


class PublicInvitationResponse(BaseModel):
    id: UUID
    slug: str
    template: str
    config: dict[str, Any]
    sections: list[SectionResponse]

    @classmethod
    def build(
        cls, invitation: InvitationDTO, document: RenderableDocument
    ) -> "PublicInvitationResponse":
        return cls(
            id=invitation.id,
            slug=invitation.slug,
            template=document.template,
            config=invitation.config,
            sections=[
                SectionResponse(name=section.name.value, data=section.data)
                for section in document.sections
            ],
        )
