INVITATIONS_URL = "/api/v1/invitations"
INVITATION_URL = "/api/v1/invitations/{invitation_id}"
PUBLISH_INVITATION_URL = "/api/v1/invitations/{invitation_id}/publish"
UNPUBLISH_INVITATION_URL = "/api/v1/invitations/{invitation_id}/unpublish"
CHECK_SLUG_URL = "/api/v1/invitations/check-slug"
SUGGEST_SLUG_URL = "/api/v1/invitations/suggest-slug"
PUBLIC_INVITATION_URL = "/api/v1/public/invitations/{slug}"
