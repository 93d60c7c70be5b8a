from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base, TimeStamp


class Invitation(Base, TimeStamp):
    __tablename__ = TableNames.INVITATIONS.value

    # Identity of the authenticated creator, issued by the external auth provider
    owner_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # Receives new-RSVP notifications, forwarded by the auth provider
    owner_email: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    slug: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, index=True)
    # Plain JSON (not JSONB) so key order survives the round trip
    config: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)

    is_published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    # Set on first publish and never cleared
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )

    def __repr__(self) -> str:
        state = "published" if self.is_published else "draft"
        return f"<Invitation {self.slug} ({state})>"
