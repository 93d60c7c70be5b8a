from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SectionName(str, Enum):
    GREETING = "greeting"
    COUPLE_DETAILS = "couple_details"
    SCHEDULE = "schedule"
    COUNTDOWN = "countdown"
    RSVP = "rsvp"
    ENTRANCE_CARD = "entrance_card"
    PHOTO_GALLERY = "photo_gallery"
    REGISTRY = "registry"
    GUESTBOOK = "guestbook"
    CLOSING = "closing"


@dataclass(frozen=True)
class Section:
    name: SectionName
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RenderableDocument:
    """Ordered, template-specific sections handed to the visual layer."""

    template: str
    sections: list[Section]

    @property
    def section_names(self) -> list[SectionName]:
        return [section.name for section in self.sections]

    def section(self, name: SectionName) -> Section | None:
        return next((section for section in self.sections if section.name == name), None)
