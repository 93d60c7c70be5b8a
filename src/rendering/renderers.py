"""Per-template renderers.

A renderer never draws anything. It turns a validated configuration into
plain section payloads, in the order the template shows them.
"""

from datetime import datetime
from typing import Any, ClassVar

from src.invitations.config_schema import (
    Event,
    InvitationConfigBase,
    PosterConfig,
    StorybookConfig,
    ValidatedConfig,
)
from src.rendering.sections import RenderableDocument, Section, SectionName


def _event_data(event: Event) -> dict[str, Any]:
    return {
        "name": event.name,
        "date": event.date,
        "time": event.time,
        "venue": event.venue,
        "address": event.address,
    }


class TemplateRenderer:
    sections: ClassVar[tuple[SectionName, ...]] = ()

    def render(self, config: ValidatedConfig) -> RenderableDocument:
        model = config.model
        return RenderableDocument(
            template=config.template.value,
            sections=[Section(name=name, data=self.build(name, model)) for name in self.sections],
        )

    def build(self, name: SectionName, model: InvitationConfigBase) -> dict[str, Any]:
        builder = getattr(self, f"build_{name.value}")
        return builder(model)

    def build_greeting(self, model: InvitationConfigBase) -> dict[str, Any]:
        return {"couple_names": model.couple_names}

    def build_couple_details(self, model: InvitationConfigBase) -> dict[str, Any]:
        return {
            role: {"name": person.name, "parents": person.parents, "photo": person.photo}
            for role, person in (("bride", model.couple.bride), ("groom", model.couple.groom))
        }

    def build_schedule(self, model: InvitationConfigBase) -> dict[str, Any]:
        return {"events": [_event_data(event) for event in model.events]}

    def build_countdown(self, model: InvitationConfigBase) -> dict[str, Any]:
        return {"target": datetime.fromisoformat(model.first_event.date).isoformat()}

    def build_rsvp(self, model: InvitationConfigBase) -> dict[str, Any]:
        return {"event_name": model.first_event.name}

    def build_entrance_card(self, model: InvitationConfigBase) -> dict[str, Any]:
        return {"couple_names": model.couple_names, "event": _event_data(model.first_event)}

    def build_photo_gallery(self, model: InvitationConfigBase) -> dict[str, Any]:
        return {"photos": list(model.photos)}

    def build_registry(self, model: InvitationConfigBase) -> dict[str, Any]:
        return {}

    def build_guestbook(self, model: InvitationConfigBase) -> dict[str, Any]:
        return {
            "wishes": [
                {"name": wish.name, "message": wish.message, "date": wish.date}
                for wish in model.wishes
            ]
        }

    def build_closing(self, model: InvitationConfigBase) -> dict[str, Any]:
        return {"couple_names": model.couple_names}


class StorybookRenderer(TemplateRenderer):
    sections = (
        SectionName.GREETING,
        SectionName.COUPLE_DETAILS,
        SectionName.SCHEDULE,
        SectionName.COUNTDOWN,
        SectionName.RSVP,
        SectionName.PHOTO_GALLERY,
        SectionName.REGISTRY,
        SectionName.GUESTBOOK,
        SectionName.CLOSING,
    )

    def build_registry(self, model: StorybookConfig) -> dict[str, Any]:
        banks = model.registry.banks if model.registry else []
        return {
            "banks": [
                {"name": bank.name, "account": bank.account, "holder": bank.holder}
                for bank in banks
            ]
        }


class StorybookSkinRenderer(StorybookRenderer):
    """Storybook skins that also hand out an entrance card."""

    sections = (
        SectionName.GREETING,
        SectionName.COUPLE_DETAILS,
        SectionName.SCHEDULE,
        SectionName.COUNTDOWN,
        SectionName.RSVP,
        SectionName.ENTRANCE_CARD,
        SectionName.PHOTO_GALLERY,
        SectionName.REGISTRY,
        SectionName.GUESTBOOK,
        SectionName.CLOSING,
    )


class PosterRenderer(TemplateRenderer):
    sections = StorybookSkinRenderer.sections

    def build_greeting(self, model: PosterConfig) -> dict[str, Any]:
        return {
            "couple_names": model.couple_names,
            "colors": {
                "primary": model.colors.primary,
                "secondary": model.colors.secondary,
                "accent": model.colors.accent,
            },
        }

    def build_registry(self, model: PosterConfig) -> dict[str, Any]:
        registry = model.registry
        links = registry.links if registry else []
        return {
            "message": registry.message if registry else None,
            "links": [{"name": link.name, "url": link.url} for link in links],
        }
