from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.dependencies import get_guestbook_service
from src.guestbook.dtos import GUESTBOOK_LIST_MAX_LIMIT
from src.guestbook.schemas import GuestbookEntryRequest, GuestbookEntryResponse
from src.guestbook.service import GuestbookService
from src.guestbook.urls import GUESTBOOK_URL

router = APIRouter()


@router.post(
    GUESTBOOK_URL, response_model=GuestbookEntryResponse, status_code=status.HTTP_201_CREATED
)
async def post_guestbook_message(
    invitation_id: UUID,
    request: GuestbookEntryRequest,
    service: GuestbookService = Depends(get_guestbook_service),
) -> GuestbookEntryResponse:
    entry = await service.post(invitation_id, name=request.name, message=request.message)
    return GuestbookEntryResponse.from_dto(entry)


@router.get(GUESTBOOK_URL, response_model=list[GuestbookEntryResponse])
async def list_guestbook_messages(
    invitation_id: UUID,
    limit: int = Query(GUESTBOOK_LIST_MAX_LIMIT),
    service: GuestbookService = Depends(get_guestbook_service),
) -> list[GuestbookEntryResponse]:
    """Most recent messages first."""
    entries = await service.list(invitation_id, limit=limit)
    return [GuestbookEntryResponse.from_dto(entry) for entry in entries]
