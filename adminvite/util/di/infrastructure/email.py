"""Email infrastructure providers."""

from dishka import Scope, provide

from adminvite.adapter.resend import MockEmailSender, ResendEmailSender
from adminvite.config import EmailSettings
from adminvite.domain.error import ConfigurationMissingError
from adminvite.domain.service import SendEmailPort
from adminvite.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider using Resend."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_send_email_port(self, email_settings: EmailSettings) -> SendEmailPort:
        """Provide Resend email transport.

        Returns:
            Resend client

        Raises:
            ConfigurationMissingError: If the Resend API key is not configured
        """
        if not email_settings.resend_api_key:
            raise ConfigurationMissingError("Resend API key is not configured")

        return ResendEmailSender(
            api_key=email_settings.resend_api_key,
            from_address=email_settings.from_address,
            api_url=email_settings.resend_api_url,
            default_reply_to=email_settings.reply_to,
            timeout=email_settings.timeout_seconds,
        )


class MockEmailProvider(EmailProvider):
    """Mock email provider that records messages instead of sending them."""

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def get_mock_email_sender(self) -> MockEmailSender:
        """Provide the recording email sender."""
        return MockEmailSender()

    @provide
    def get_send_email_port(self, sender: MockEmailSender) -> SendEmailPort:
        """Provide mock email transport."""
        return sender
