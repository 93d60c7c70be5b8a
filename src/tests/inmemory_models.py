"""In-memory read/write models for service and endpoint tests.

All models of one ``InMemoryDatabase`` share its tables, so a service wired
with them behaves like one backed by a single database. Inserts never await
between the uniqueness check and the write, which makes them atomic under
``asyncio.gather``.
"""

import itertools
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any
from uuid import UUID, uuid4

from src.dependencies import get_guestbook_service, get_invitation_service, get_rsvp_service
from src.email_service.base import EmailServiceBase
from src.email_service.templates import Language
from src.errors import SlugTakenError, StoreError
from src.guestbook.dtos import GuestbookEntryDTO
from src.guestbook.repository.read_models import GuestbookReadModel
from src.guestbook.repository.write_models import GuestbookWriteModel
from src.guestbook.service import GuestbookService
from src.invitations.dtos import InvitationDTO
from src.invitations.lifecycle import InvitationService
from src.invitations.repository.read_models import InvitationReadModel
from src.invitations.repository.write_models import UPDATABLE_FIELDS, InvitationWriteModel
from src.models.base import utc_now
from src.rsvps.dtos import RSVPDTO, RSVPSummaryDTO
from src.rsvps.repository.read_models import RSVPReadModel
from src.rsvps.repository.write_models import RSVPWriteModel
from src.rsvps.service import RSVPService


@dataclass
class InMemoryDatabase:
    invitations: dict[UUID, InvitationDTO] = field(default_factory=dict)
    rsvps: list[RSVPDTO] = field(default_factory=list)
    guestbook: list[GuestbookEntryDTO] = field(default_factory=list)
    # Insertion order breaks created_at ties
    sequence: dict[UUID, int] = field(default_factory=dict)
    counter: itertools.count = field(default_factory=itertools.count)
    fail: bool = False

    def check(self) -> None:
        if self.fail:
            raise StoreError()

    def stamp(self, row_id: UUID) -> None:
        self.sequence[row_id] = next(self.counter)

    def newest_first(self, rows: list) -> list:
        return sorted(rows, key=lambda row: (row.created_at, self.sequence[row.id]), reverse=True)


class InMemoryInvitationReadModel(InvitationReadModel):
    def __init__(self, db: InMemoryDatabase):
        self.db = db

    async def get(self, invitation_id: UUID) -> InvitationDTO | None:
        self.db.check()
        return self.db.invitations.get(invitation_id)

    async def get_by_slug(self, slug: str) -> InvitationDTO | None:
        self.db.check()
        return next((inv for inv in self.db.invitations.values() if inv.slug == slug), None)

    async def list_by_owner(self, owner_id: str) -> list[InvitationDTO]:
        self.db.check()
        owned = [inv for inv in self.db.invitations.values() if inv.owner_id == owner_id]
        return self.db.newest_first(owned)

    async def slug_exists(self, slug: str) -> bool:
        self.db.check()
        return any(inv.slug == slug for inv in self.db.invitations.values())


class InMemoryInvitationWriteModel(InvitationWriteModel):
    def __init__(self, db: InMemoryDatabase):
        self.db = db

    def _slug_taken(self, slug: str, exclude: UUID | None = None) -> bool:
        return any(
            inv.slug == slug and inv.id != exclude for inv in self.db.invitations.values()
        )

    async def create(
        self,
        owner_id: str,
        slug: str,
        config: dict[str, Any],
        owner_email: str | None = None,
    ) -> InvitationDTO:
        self.db.check()
        if self._slug_taken(slug):
            raise SlugTakenError(slug)
        now = utc_now()
        invitation = InvitationDTO(
            id=uuid4(),
            owner_id=owner_id,
            slug=slug,
            config=config,
            is_published=False,
            created_at=now,
            updated_at=now,
            owner_email=owner_email,
        )
        self.db.invitations[invitation.id] = invitation
        self.db.stamp(invitation.id)
        return invitation

    async def update(self, invitation_id: UUID, **fields: Any) -> InvitationDTO | None:
        self.db.check()
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        invitation = self.db.invitations.get(invitation_id)
        if invitation is None:
            return None
        if "slug" in fields and self._slug_taken(fields["slug"], exclude=invitation_id):
            raise SlugTakenError(fields["slug"])
        updated = replace(invitation, updated_at=utc_now(), **fields)
        self.db.invitations[invitation_id] = updated
        return updated

    async def delete(self, invitation_id: UUID) -> bool:
        self.db.check()
        self.db.rsvps = [r for r in self.db.rsvps if r.invitation_id != invitation_id]
        self.db.guestbook = [e for e in self.db.guestbook if e.invitation_id != invitation_id]
        return self.db.invitations.pop(invitation_id, None) is not None


class InMemoryRSVPReadModel(RSVPReadModel):
    def __init__(self, db: InMemoryDatabase):
        self.db = db

    async def list_for_invitation(self, invitation_id: UUID) -> list[RSVPDTO]:
        self.db.check()
        return self.db.newest_first(
            [rsvp for rsvp in self.db.rsvps if rsvp.invitation_id == invitation_id]
        )

    async def summaries(self, invitation_ids: list[UUID]) -> dict[UUID, RSVPSummaryDTO]:
        self.db.check()
        return {
            invitation_id: RSVPSummaryDTO.from_rsvps(
                [rsvp for rsvp in self.db.rsvps if rsvp.invitation_id == invitation_id]
            )
            for invitation_id in invitation_ids
        }


class InMemoryRSVPWriteModel(RSVPWriteModel):
    def __init__(self, db: InMemoryDatabase):
        self.db = db

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
        self.db.check()
        rsvp = RSVPDTO(
            id=uuid4(),
            invitation_id=invitation_id,
            name=name,
            email=email,
            phone=phone,
            attendance=attendance,
            guest_count=guest_count,
            message=message,
            created_at=utc_now(),
        )
        self.db.rsvps.append(rsvp)
        self.db.stamp(rsvp.id)
        return rsvp


class InMemoryGuestbookReadModel(GuestbookReadModel):
    def __init__(self, db: InMemoryDatabase):
        self.db = db

    async def list_recent(self, invitation_id: UUID, limit: int) -> list[GuestbookEntryDTO]:
        self.db.check()
        entries = [e for e in self.db.guestbook if e.invitation_id == invitation_id]
        return self.db.newest_first(entries)[:limit]


class InMemoryGuestbookWriteModel(GuestbookWriteModel):
    def __init__(self, db: InMemoryDatabase):
        self.db = db

    async def add(self, invitation_id: UUID, name: str, message: str) -> GuestbookEntryDTO:
        self.db.check()
        entry = GuestbookEntryDTO(
            id=uuid4(),
            invitation_id=invitation_id,
            name=name,
            message=message,
            created_at=utc_now(),
        )
        self.db.guestbook.append(entry)
        self.db.stamp(entry.id)
        return entry


class RecordingEmailService(EmailServiceBase):
    """Keeps every confirmation and host notification instead of sending them."""

    def __init__(self, fail: bool = False, fail_notifications: bool = False):
        self.sent: list[dict[str, Any]] = []
        self.notifications: list[dict[str, Any]] = []
        self.fail = fail
        self.fail_notifications = fail_notifications

    async def send_rsvp_confirmation(
        self,
        to_address: str,
        guest_name: str,
        couple_names: str,
        attending: bool,
        guest_count: int | None,
        invitation_url: str,
        language: Language = Language.EN,
    ) -> None:
        if self.fail:
            raise ConnectionError("SMTP server unavailable")
        self.sent.append(
            {
                "to_address": to_address,
                "guest_name": guest_name,
                "couple_names": couple_names,
                "attending": attending,
                "guest_count": guest_count,
                "invitation_url": invitation_url,
                "language": language,
            }
        )

    async def send_rsvp_notification(
        self,
        to_address: str,
        guest_name: str,
        guest_email: str,
        guest_phone: str | None,
        attending: bool,
        guest_count: int | None,
        message: str | None,
        couple_names: str,
        invitation_url: str,
        language: Language = Language.EN,
    ) -> None:
        if self.fail or self.fail_notifications:
            raise ConnectionError("SMTP server unavailable")
        self.notifications.append(
            {
                "to_address": to_address,
                "guest_name": guest_name,
                "guest_email": guest_email,
                "guest_phone": guest_phone,
                "attending": attending,
                "guest_count": guest_count,
                "message": message,
                "couple_names": couple_names,
                "invitation_url": invitation_url,
                "language": language,
            }
        )


def make_invitation_service(db: InMemoryDatabase) -> InvitationService:
    return InvitationService(
        read_model=InMemoryInvitationReadModel(db),
        write_model=InMemoryInvitationWriteModel(db),
        rsvp_read_model=InMemoryRSVPReadModel(db),
    )


def make_rsvp_service(
    db: InMemoryDatabase, email_service: EmailServiceBase | None = None
) -> RSVPService:
    return RSVPService(
        invitation_read_model=InMemoryInvitationReadModel(db),
        read_model=InMemoryRSVPReadModel(db),
        write_model=InMemoryRSVPWriteModel(db),
        email_service=email_service,
    )


def make_guestbook_service(db: InMemoryDatabase) -> GuestbookService:
    return GuestbookService(
        invitation_read_model=InMemoryInvitationReadModel(db),
        read_model=InMemoryGuestbookReadModel(db),
        write_model=InMemoryGuestbookWriteModel(db),
    )


def classic_config(**overrides: Any) -> dict[str, Any]:
    """A minimal valid ``classic`` configuration."""
    config: dict[str, Any] = {
        "template": "classic",
        "couple": {
            "bride": {"name": "Jane"},
            "groom": {"name": "John"},
        },
        "events": [
            {
                "name": "Holy Matrimony",
                "date": "2025-06-01",
                "time": "10:00",
                "venue": "St. Mary Chapel",
                "address": "1 Chapel Road",
            }
        ],
    }
    config.update(overrides)
    return config


def poster_config(template: str = "memphis-abstract", **overrides: Any) -> dict[str, Any]:
    config = classic_config(
        template=template,
        colors={"primary": "#ff0066", "secondary": "#00ccff", "accent": "#ffee00"},
    )
    config.update(overrides)
    return config


def memory_overrides(
    db: InMemoryDatabase, email_service: EmailServiceBase | None = None
) -> dict[Callable, Callable]:
    """Dependency overrides wiring every service to ``db``."""
    return {
        get_invitation_service: lambda: make_invitation_service(db),
        get_rsvp_service: lambda: make_rsvp_service(db, email_service=email_service),
        get_guestbook_service: lambda: make_guestbook_service(db),
    }
