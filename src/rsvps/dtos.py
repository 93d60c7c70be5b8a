from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class RSVPDTO:
    """DTO for a stored RSVP."""

    id: UUID
    invitation_id: UUID
    name: str
    email: str
    attendance: bool
    created_at: datetime
    phone: str | None = None
    guest_count: int | None = None
    message: str | None = None


@dataclass(frozen=True)
class RSVPSummaryDTO:
    """Counts computed on read over the append-only RSVP set."""

    total_responses: int = 0
    attending: int = 0
    declined: int = 0
    total_guests: int = 0

    @classmethod
    def from_rsvps(cls, rsvps: list[RSVPDTO]) -> "RSVPSummaryDTO":
        attending = [rsvp for rsvp in rsvps if rsvp.attendance]
        return cls(
            total_responses=len(rsvps),
            attending=len(attending),
            declined=len(rsvps) - len(attending),
            total_guests=sum(rsvp.guest_count or 0 for rsvp in attending),
        )
