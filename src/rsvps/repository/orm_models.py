from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base, CreatedStamp


class RSVP(Base, CreatedStamp):
    __tablename__ = TableNames.RSVPS.value

    invitation_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.INVITATIONS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    attendance: Mapped[bool] = mapped_column(Boolean, nullable=False)
    # Null when the guest declined
    guest_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        answer = "attending" if self.attendance else "declined"
        return f"<RSVP {self.name} - {answer}>"
