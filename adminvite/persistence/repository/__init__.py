"""PostgreSQL repository implementations."""

from adminvite.persistence.repository.admin_invitation import (
    PostgresAdminInvitationRepository,
)

__all__ = [
    "PostgresAdminInvitationRepository",
]
