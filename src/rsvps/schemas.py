from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from src.rsvps.dtos import RSVPDTO, RSVPSummaryDTO


class RSVPSummaryResponse(BaseModel):
    total_responses: int
    attending: int
    declined: int
    total_guests: int

    @classmethod
    def from_dto(cls, summary: RSVPSummaryDTO) -> "RSVPSummaryResponse":
        return cls(
            total_responses=summary.total_responses,
            attending=summary.attending,
            declined=summary.declined,
            total_guests=summary.total_guests,
        )


class RSVPResponse(BaseModel):
    id: UUID
    name: str
    email: str
    phone: str | None
    attendance: bool
    guest_count: int | None
    message: str | None
    created_at: datetime

    @classmethod
    def from_dto(cls, rsvp: RSVPDTO) -> "RSVPResponse":
        return cls(
            id=rsvp.id,
            name=rsvp.name,
            email=rsvp.email,
            phone=rsvp.phone,
            attendance=rsvp.attendance,
            guest_count=rsvp.guest_count,
            message=rsvp.message,
            created_at=rsvp.created_at,
        )


class SubmitRSVPResponse(BaseModel):
    message: str
    rsvp: RSVPResponse


class OwnerRSVPListResponse(BaseModel):
    summary: RSVPSummaryResponse
    rsvps: list[RSVPResponse]
