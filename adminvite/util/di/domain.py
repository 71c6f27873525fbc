"""Domain layer DI providers."""

from dishka import Scope, provide

from adminvite.domain.service import AdminInvitationDomainService
from adminvite.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    The invitation domain service is stateless, so one instance serves the
    whole application.
    """

    scope = Scope.APP

    @provide
    def get_admin_invitation_domain_service(self) -> AdminInvitationDomainService:
        """Provide admin invitation domain service."""
        return AdminInvitationDomainService()
