"""Outbound email contract."""

from adminvite.domain.value.common import ValueObject


class EmailMessage(ValueObject):
    """A single outbound email."""

    to: str
    subject: str
    html: str
    reply_to: str | None = None


class EmailResult(ValueObject):
    """Outcome reported by the email transport."""

    id: str
    success: bool
    error: str | None = None


class SendEmailPort:
    """Generic email transport interface."""

    async def send(self, message: EmailMessage) -> EmailResult:
        """Send an email.

        Transport failures are reported through the result rather than
        raised.

        Args:
            message: The email to send

        Returns:
            Transport message id and success flag
        """
        raise NotImplementedError
