from uuid import UUID

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base, CreatedStamp


class GuestbookEntry(Base, CreatedStamp):
    __tablename__ = TableNames.GUESTBOOK_ENTRIES.value

    invitation_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.INVITATIONS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<GuestbookEntry by {self.name}>"
