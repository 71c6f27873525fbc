"""create_admin_invitations

Create the admin invitation schema:
- admin_invitation_status enum (pending, accepted, expired)
- admin_invitations table with a unique invitation token
- at most one pending invitation per email, compared case-insensitively

Revision ID: 3c9d2f61a7e4
Revises:
Create Date: 2026-10-18 09:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c9d2f61a7e4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM type (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE admin_invitation_status AS ENUM ('pending', 'accepted', 'expired');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.create_table(
        "admin_invitations",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(254), nullable=False),
        sa.Column("invitation_token", sa.String(255), nullable=False, unique=True),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(
                "pending",
                "accepted",
                "expired",
                name="admin_invitation_status",
                create_type=False,
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.execute("""
        CREATE INDEX idx_admin_invitations_email
        ON admin_invitations (lower(email))
    """)

    # Partial unique constraint: only one pending invitation per address
    op.execute("""
        CREATE UNIQUE INDEX idx_admin_invitations_unique_pending_email
        ON admin_invitations (lower(email))
        WHERE status = 'pending'
    """)

    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER update_admin_invitations_updated_at
        BEFORE UPDATE ON admin_invitations
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute(
        "DROP TRIGGER IF EXISTS update_admin_invitations_updated_at "
        "ON admin_invitations"
    )
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")
    op.drop_table("admin_invitations")
    op.execute("DROP TYPE IF EXISTS admin_invitation_status")
