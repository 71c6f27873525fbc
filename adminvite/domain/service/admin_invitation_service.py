"""Admin invitation domain service."""

from urllib.parse import urlencode, urlparse, urlunparse

import logfire

from adminvite.domain.error import (
    BusinessRuleViolationError,
    ConfigurationMissingError,
    ParameterInvalidError,
)
from adminvite.domain.model.admin_invitation import (
    INVITATION_VALIDITY_HOURS,
    AdminInvitation,
)
from adminvite.domain.value import InvitationToken

from .base import Service

VERIFICATION_PATH = "/admin/verify"


class AdminInvitationDomainService(Service):
    """Stateless invitation lifecycle policy."""

    def generate_token(self) -> InvitationToken:
        """Generate a new random invitation token."""
        return InvitationToken.generate()

    def create_new_invitation(self, email: str) -> AdminInvitation:
        """Create a new pending invitation.

        Args:
            email: Invitee email address

        Returns:
            Unsaved invitation

        Raises:
            ParameterInvalidError: If the email is invalid
        """
        invitation = AdminInvitation.create_new(email)
        logfire.info(
            "Invitation created",
            email=invitation.email.root,
            expires_at=invitation.expires_at.isoformat(),
        )
        return invitation

    def extend_invitation_if_needed(
        self, invitation: AdminInvitation
    ) -> AdminInvitation:
        """Renew a pending invitation that is about to expire.

        Near-expiry invitations get a fresh 24 hour window on the same token
        instead of a new token.

        Args:
            invitation: Existing pending invitation

        Returns:
            The extended invitation, or the input unchanged
        """
        if not invitation.should_extend_expiration():
            return invitation

        extended = invitation.extend_expiration(INVITATION_VALIDITY_HOURS)
        logfire.info(
            "Invitation expiration extended",
            invitation_id=str(invitation.id),
            previous_expires_at=invitation.expires_at.isoformat(),
            expires_at=extended.expires_at.isoformat(),
        )
        return extended

    def validate_invitation(self, invitation: AdminInvitation) -> None:
        """Ensure an invitation can still be used.

        Raises:
            BusinessRuleViolationError: If it is expired or not pending
        """
        if invitation.is_expired():
            raise BusinessRuleViolationError(
                "Invitation has expired",
                {"expires_at": invitation.expires_at.isoformat()},
            )
        if not invitation.status.is_pending():
            raise BusinessRuleViolationError(
                f"Invitation is {invitation.status.value}",
                {"status": invitation.status.value},
            )

    def build_verification_link(
        self, invitation: AdminInvitation, frontend_origin: str | None
    ) -> str:
        """Build the link the invitee follows to finish signup.

        Args:
            invitation: Invitation whose token goes into the link
            frontend_origin: Base URL of the frontend

        Returns:
            Verification URL with the URL-encoded token

        Raises:
            ConfigurationMissingError: If no frontend origin is configured
            ParameterInvalidError: If the origin is not an absolute http(s) URL
        """
        if not frontend_origin or not frontend_origin.strip():
            raise ConfigurationMissingError(
                "Frontend URL required for verification links is not configured"
            )

        origin = frontend_origin.strip()
        try:
            parsed = urlparse(origin)
        except ValueError as e:
            logfire.warn("Invalid frontend URL", frontend_origin=frontend_origin)
            raise ParameterInvalidError("Frontend URL is not a valid base URL") from e
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            logfire.warn("Invalid frontend URL", frontend_origin=frontend_origin)
            raise ParameterInvalidError("Frontend URL is not a valid base URL")

        # Query and fragment of the origin are dropped; the token is the only parameter
        return urlunparse(
            parsed._replace(
                path=parsed.path.rstrip("/") + VERIFICATION_PATH,
                params="",
                query=urlencode({"token": invitation.invitation_token.root}),
                fragment="",
            )
        )
