"""Domain model entities."""

from adminvite.domain.model.admin_invitation import AdminInvitation

__all__ = [
    "AdminInvitation",
]
