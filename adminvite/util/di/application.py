"""Application layer DI providers."""

from dishka import Scope, provide

from adminvite.application.usecase.admin_invitation import (
    CreateAdminInvitationUseCase,
)
from adminvite.domain.repository import (
    LoadAdminInvitationPort,
    SaveAdminInvitationPort,
)
from adminvite.domain.service import AdminInvitationDomainService, SendEmailPort
from adminvite.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_create_admin_invitation_use_case(
        self,
        admin_invitation_domain_service: AdminInvitationDomainService,
        load_admin_invitation_port: LoadAdminInvitationPort,
        save_admin_invitation_port: SaveAdminInvitationPort,
        send_email_port: SendEmailPort,
    ) -> CreateAdminInvitationUseCase:
        """Provide create admin invitation use case."""
        return CreateAdminInvitationUseCase(
            admin_invitation_domain_service=admin_invitation_domain_service,
            load_admin_invitation_port=load_admin_invitation_port,
            save_admin_invitation_port=save_admin_invitation_port,
            send_email_port=send_email_port,
        )
