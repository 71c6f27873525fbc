"""In-memory repository implementations for testing."""

from .admin_invitation import InMemoryAdminInvitationRepository

__all__ = [
    "InMemoryAdminInvitationRepository",
]
