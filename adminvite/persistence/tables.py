"""SQLAlchemy table definitions.

These table definitions are used for classical ORM mapping.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Enum, Index, MetaData, String, Table, func, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ADMIN INVITATIONS TABLE
# ============================================================================
admin_invitations_table = Table(
    "admin_invitations",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("email", String(254), nullable=False),
    Column("invitation_token", String(255), nullable=False, unique=True),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column(
        "status",
        Enum(
            "pending",
            "accepted",
            "expired",
            name="admin_invitation_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

Index(
    "idx_admin_invitations_email",
    func.lower(admin_invitations_table.c.email),
)

# Only one pending invitation per address (case-insensitive)
Index(
    "idx_admin_invitations_unique_pending_email",
    func.lower(admin_invitations_table.c.email),
    unique=True,
    postgresql_where=text("status = 'pending'"),
)
