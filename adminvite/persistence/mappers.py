"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from adminvite.domain.model import AdminInvitation


def row_to_admin_invitation(row: Dict[str, Any]) -> AdminInvitation:
    """Convert database row to AdminInvitation domain model.

    Args:
        row: Database row as dict

    Returns:
        AdminInvitation domain model
    """
    return AdminInvitation.create(
        id=row["id"],
        email=row["email"],
        invitation_token=row["invitation_token"],
        expires_at=row["expires_at"],
        status=row["status"],
        created_at=row.get("created_at"),
    )


def admin_invitation_to_dict(invitation: AdminInvitation) -> Dict[str, Any]:
    """Convert AdminInvitation domain model to database dict.

    Args:
        invitation: AdminInvitation domain model (must already have an id)

    Returns:
        Dict suitable for database insertion/update
    """
    # Email and InvitationToken dump to their root strings, status to its value
    return invitation.model_dump(mode="python") | {
        "status": invitation.status.value,
    }
