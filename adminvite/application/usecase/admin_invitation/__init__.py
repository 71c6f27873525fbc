"""Admin invitation use cases."""

from adminvite.application.usecase.admin_invitation.create_admin_invitation import (
    CreateAdminInvitationRequest,
    CreateAdminInvitationResponse,
    CreateAdminInvitationUseCase,
)

__all__ = [
    "CreateAdminInvitationRequest",
    "CreateAdminInvitationResponse",
    "CreateAdminInvitationUseCase",
]
