GUESTBOOK_URL = "/api/v1/public/invitations/{invitation_id}/guestbook"
