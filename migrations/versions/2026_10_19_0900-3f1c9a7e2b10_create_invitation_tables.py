"""create invitations, rsvps and guestbook_entries

Revision ID: 3f1c9a7e2b10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

import sqlalchemy as sa
import sqlalchemy_utils
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f1c9a7e2b10"
down_revision = None
branch_labels = None
depends_on = None


def _uuid() -> sqlalchemy_utils.UUIDType:
    return sqlalchemy_utils.UUIDType(binary=False)


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.func.current_timestamp(),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "invitations",
        sa.Column("uuid", _uuid(), nullable=False),
        sa.Column("owner_id", sa.String(length=255), nullable=False),
        sa.Column("owner_email", sa.String(length=255), nullable=True),
        sa.Column("slug", sa.String(length=50), nullable=False),
        sa.Column("config", sa.JSON(), nullable=False),
        sa.Column("is_published", sa.Boolean(), nullable=False),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_invitations_owner_id", "invitations", ["owner_id"])
    op.create_index("ix_invitations_slug", "invitations", ["slug"], unique=True)
    op.create_index("ix_invitations_created_at", "invitations", ["created_at"])

    op.create_table(
        "rsvps",
        sa.Column("uuid", _uuid(), nullable=False),
        sa.Column("invitation_id", _uuid(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("attendance", sa.Boolean(), nullable=False),
        sa.Column("guest_count", sa.Integer(), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["invitation_id"], ["invitations.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_rsvps_invitation_id", "rsvps", ["invitation_id"])
    op.create_index("ix_rsvps_created_at", "rsvps", ["created_at"])

    op.create_table(
        "guestbook_entries",
        sa.Column("uuid", _uuid(), nullable=False),
        sa.Column("invitation_id", _uuid(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["invitation_id"], ["invitations.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_guestbook_entries_invitation_id", "guestbook_entries", ["invitation_id"])
    op.create_index("ix_guestbook_entries_created_at", "guestbook_entries", ["created_at"])


def downgrade() -> None:
    op.drop_table("guestbook_entries")
    op.drop_table("rsvps")
    op.drop_table("invitations")
