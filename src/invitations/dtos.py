from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID

from src.rsvps.dtos import RSVPSummaryDTO


class TemplateId(str, Enum):
    CLASSIC = "classic"
    FLORAL_FOREST = "floral-forest"
    COLORFUL_LOVE_JOY = "colorful-love-joy"
    COMIC_POP_ART = "comic-pop-art"
    MONOCHROME_VINTAGE = "monochrome-vintage"
    MEMPHIS_ABSTRACT = "memphis-abstract"
    PIXEL_ARCADE = "pixel-arcade"


class InvitationStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


@dataclass(frozen=True)
class InvitationDTO:
    """DTO for an invitation row."""

    id: UUID
    owner_id: str
    slug: str
    config: dict[str, Any]
    is_published: bool
    created_at: datetime
    updated_at: datetime
    published_at: datetime | None = None
    owner_email: str | None = None

    @property
    def status(self) -> InvitationStatus:
        return InvitationStatus.PUBLISHED if self.is_published else InvitationStatus.DRAFT

    @property
    def template(self) -> str | None:
        return self.config.get("template")


@dataclass(frozen=True)
class InvitationWithSummaryDTO:
    """DTO for the owner's dashboard listing."""

    invitation: InvitationDTO
    rsvp_summary: RSVPSummaryDTO = field(default_factory=RSVPSummaryDTO)


@dataclass(frozen=True)
class SlugAvailabilityDTO:
    slug: str
    available: bool
    error: str | None = None
