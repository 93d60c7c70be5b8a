OWNER_RSVPS_URL = "/api/v1/invitations/{invitation_id}/rsvps"
SUBMIT_RSVP_URL = "/api/v1/public/invitations/{invitation_id}/rsvps"
