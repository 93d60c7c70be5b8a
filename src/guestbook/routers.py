from fastapi import APIRouter

from .features.guestbook_messages.router import router as guestbook_messages_router

router = APIRouter()

router.include_router(guestbook_messages_router)
