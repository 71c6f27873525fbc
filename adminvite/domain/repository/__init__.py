"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from adminvite.domain.repository.admin_invitation import (
    AdminInvitationRepository,
    LoadAdminInvitationPort,
    RepositoryTestSupport,
    SaveAdminInvitationPort,
)

__all__ = [
    "AdminInvitationRepository",
    "LoadAdminInvitationPort",
    "RepositoryTestSupport",
    "SaveAdminInvitationPort",
]
