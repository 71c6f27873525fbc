"""Resend email client implementation.

Sends transactional email through the Resend HTTP API
(https://resend.com/docs/api-reference/emails/send-email).
"""

import re
from datetime import datetime, timezone
from html import unescape

import httpx
import logfire

from adminvite.adapter.error import EmailTransportError
from adminvite.domain.service.email_port import (
    EmailMessage,
    EmailResult,
    SendEmailPort,
)


class ResendError(EmailTransportError):
    """Resend API error."""

    pass


class ResendEmailSender(SendEmailPort):
    """Email transport backed by the Resend API.

    Failures never raise: HTTP errors and non-2xx responses come back as an
    unsuccessful ``EmailResult``.
    """

    def __init__(
        self,
        api_key: str,
        from_address: str,
        api_url: str = "https://api.resend.com/emails",
        default_reply_to: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Resend client.

        Args:
            api_key: Resend API key
            from_address: Sender address, e.g. ``Admin <admin@example.com>``
            api_url: Send-email endpoint
            default_reply_to: Reply-to used when the message has none
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.from_address = from_address
        self.api_url = api_url
        self.default_reply_to = default_reply_to
        self.timeout = timeout

    async def send(self, message: EmailMessage) -> EmailResult:
        """Send an email through Resend.

        Args:
            message: The email to send

        Returns:
            Resend message id on success, error description otherwise
        """
        try:
            email_id = await self._post(message)
        except ResendError as e:
            logfire.error("Resend rejected email", to=message.to, error=str(e))
            return EmailResult(id="", success=False, error=str(e))
        except httpx.HTTPError as e:
            logfire.error(
                "Resend request failed",
                to=message.to,
                error=str(e),
                error_type=type(e).__name__,
            )
            return EmailResult(id="", success=False, error=str(e) or type(e).__name__)

        logfire.info("Email sent via Resend", to=message.to, email_id=email_id)
        return EmailResult(id=email_id, success=True)

    async def _post(self, message: EmailMessage) -> str:
        payload = {
            "from": self.from_address,
            "to": message.to,
            "subject": message.subject,
            "html": message.html,
            "reply_to": message.reply_to or self.default_reply_to,
        }

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(
                self.api_url,
                json=payload,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
            )

        if response.status_code < 200 or response.status_code >= 300:
            raise ResendError(f"Resend API error: {response.text}")

        try:
            data = response.json()
        except ValueError as e:
            raise ResendError(f"Resend API error: invalid response body: {e}") from e

        return str(data.get("id", ""))


class MockEmailSender(SendEmailPort):
    """Mock email transport for development and tests.

    Records messages instead of sending them and logs a plain-text preview.
    """

    def __init__(self) -> None:
        self.sent_emails: list[EmailMessage] = []
        self._fail_next_send = False

    async def send(self, message: EmailMessage) -> EmailResult:
        """Record the email, or fail once if a failure was scheduled."""
        if self._fail_next_send:
            self._fail_next_send = False
            logfire.warn("Mock email send failure simulated", to=message.to)
            return EmailResult(
                id="", success=False, error="Mock: failed to send email"
            )

        email_id = f"mock_{int(datetime.now(timezone.utc).timestamp() * 1000)}"
        self.sent_emails.append(message)
        logfire.info(
            "Mock email sent",
            to=message.to,
            subject=message.subject,
            reply_to=message.reply_to,
            body=_html_to_text(message.html),
            email_id=email_id,
        )
        return EmailResult(id=email_id, success=True)

    @property
    def last_sent_email(self) -> EmailMessage | None:
        """The most recently recorded email."""
        return self.sent_emails[-1] if self.sent_emails else None

    def emails_sent_to(self, address: str) -> list[EmailMessage]:
        """All recorded emails addressed to ``address``."""
        return [m for m in self.sent_emails if m.to == address]

    def clear_sent_emails(self) -> None:
        """Forget recorded emails."""
        self.sent_emails.clear()

    def simulate_failure(self) -> None:
        """Make the next send report failure."""
        self._fail_next_send = True


def _html_to_text(html: str) -> str:
    text = re.sub(r"<[^>]*>", "", html)
    return re.sub(r"\s+", " ", unescape(text)).strip()
