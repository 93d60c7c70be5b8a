from fastapi import APIRouter

from .features.check_slug.router import router as check_slug_router
from .features.manage_invitations.router import router as manage_invitations_router
from .features.public_invitation.router import router as public_invitation_router

router = APIRouter()

# check-slug must precede the {invitation_id} routes
router.include_router(check_slug_router)
router.include_router(manage_invitations_router)
router.include_router(public_invitation_router)
