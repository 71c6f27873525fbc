"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from adminvite.config import EmailSettings, InvitationSettings, Settings
from adminvite.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    The Settings instance is passed in as container context, so the
    container and the app that owns it share one configuration.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_email_settings(self, settings: Settings) -> EmailSettings:
        """Provide email settings."""
        return settings.email

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        """Provide invitation settings."""
        return settings.invitations
