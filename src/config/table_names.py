from enum import Enum


class TableNames(str, Enum):
    INVITATIONS = "invitations"
    RSVPS = "rsvps"
    GUESTBOOK_ENTRIES = "guestbook_entries"
