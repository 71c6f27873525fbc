"""Create admin invitation use case."""

import logfire
from pydantic import BaseModel

from adminvite.application.usecase.admin_invitation.email_template import (
    INVITATION_SUBJECT,
    render_invitation_email,
)
from adminvite.application.usecase.base import BaseUseCase
from adminvite.domain.error import (
    DomainError,
    ExternalServiceError,
    RepositoryError,
    UnknownError,
)
from adminvite.domain.model import AdminInvitation
from adminvite.domain.repository import (
    LoadAdminInvitationPort,
    SaveAdminInvitationPort,
)
from adminvite.domain.service import (
    AdminInvitationDomainService,
    EmailMessage,
    EmailResult,
    SendEmailPort,
)
from adminvite.domain.value import Email


class CreateAdminInvitationRequest(BaseModel):
    """Request to invite an admin."""

    email: str
    frontend_origin: str | None = None


class CreateAdminInvitationResponse(BaseModel):
    """Response after inviting an admin."""

    invitation: AdminInvitation
    email_sent: bool
    verification_link: str


class CreateAdminInvitationUseCase(
    BaseUseCase[CreateAdminInvitationRequest, CreateAdminInvitationResponse]
):
    """Use case for creating (or refreshing) an admin invitation and mailing it.

    At most one pending invitation exists per email: inviting an address
    that already has one reuses its token, extending the expiry when it is
    close. The check is a plain read-then-write; concurrent requests for the
    same address are caught by the storage uniqueness rule, not here.
    """

    def __init__(
        self,
        admin_invitation_domain_service: AdminInvitationDomainService,
        load_admin_invitation_port: LoadAdminInvitationPort,
        save_admin_invitation_port: SaveAdminInvitationPort,
        send_email_port: SendEmailPort,
    ) -> None:
        """Initialize use case.

        Args:
            admin_invitation_domain_service: Invitation lifecycle policy
            load_admin_invitation_port: Invitation lookups
            save_admin_invitation_port: Invitation persistence
            send_email_port: Email transport
        """
        self.admin_invitation_domain_service = admin_invitation_domain_service
        self.load_admin_invitation_port = load_admin_invitation_port
        self.save_admin_invitation_port = save_admin_invitation_port
        self.send_email_port = send_email_port

    async def execute(
        self, request: CreateAdminInvitationRequest
    ) -> CreateAdminInvitationResponse:
        """Execute create admin invitation use case.

        Args:
            request: Invitee email and frontend origin

        Returns:
            The saved invitation, whether the email went out, and the link

        Raises:
            ParameterInvalidError: If the email or frontend URL is invalid
            ConfigurationMissingError: If no frontend URL is configured
            BusinessRuleViolationError: If the invitation is unusable after saving
            ResourceConflictError: If storage rejects a duplicate
            RepositoryError: If loading or saving fails
            ExternalServiceError: If the email could not be sent
            UnknownError: For any other failure
        """
        with logfire.span("create_admin_invitation", email=request.email):
            try:
                return await self._create_invitation(request)
            except DomainError:
                raise
            except Exception as e:
                logfire.error(
                    "Unexpected error creating admin invitation",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise UnknownError(
                    "An unexpected error occurred while creating the invitation",
                    {"original_error": str(e)},
                ) from e

    async def _create_invitation(
        self, request: CreateAdminInvitationRequest
    ) -> CreateAdminInvitationResponse:
        email = Email.create(request.email)
        service = self.admin_invitation_domain_service

        invitation = await self._find_pending_invitation(email)

        # A pending invitation past its expiry is closed out and replaced
        if invitation is not None and invitation.is_expired():
            logfire.info(
                "Pending invitation past expiry, expiring it",
                invitation_id=str(invitation.id),
                expires_at=invitation.expires_at.isoformat(),
            )
            await self._save(invitation.expire())
            invitation = None

        if invitation is not None:
            invitation = service.extend_invitation_if_needed(invitation)
        else:
            invitation = service.create_new_invitation(request.email)

        invitation = await self._save(invitation)

        service.validate_invitation(invitation)
        verification_link = service.build_verification_link(
            invitation, request.frontend_origin
        )

        result = await self._send_invitation_email(invitation, verification_link)

        logfire.info(
            "Admin invitation sent",
            invitation_id=str(invitation.id),
            email=invitation.email.root,
            email_id=result.id,
        )
        return CreateAdminInvitationResponse(
            invitation=invitation,
            email_sent=result.success,
            verification_link=verification_link,
        )

    async def _find_pending_invitation(self, email: Email) -> AdminInvitation | None:
        try:
            return await self.load_admin_invitation_port.find_pending_by_email(email)
        except DomainError:
            raise
        except Exception as e:
            logfire.error("Error finding existing invitation", error=str(e))
            raise RepositoryError(
                "Failed to look up existing invitations",
                {"original_error": str(e)},
            ) from e

    async def _save(self, invitation: AdminInvitation) -> AdminInvitation:
        try:
            return await self.save_admin_invitation_port.save(invitation)
        except DomainError:
            raise
        except Exception as e:
            logfire.error("Error saving invitation", error=str(e))
            raise RepositoryError(
                "Failed to save invitation",
                {"original_error": str(e)},
            ) from e

    async def _send_invitation_email(
        self, invitation: AdminInvitation, verification_link: str
    ) -> EmailResult:
        message = EmailMessage(
            to=invitation.email.root,
            subject=INVITATION_SUBJECT,
            html=render_invitation_email(verification_link, invitation.expires_at),
        )

        try:
            result = await self.send_email_port.send(message)
        except Exception as e:
            logfire.error("Error sending invitation email", error=str(e))
            raise ExternalServiceError(
                "An error occurred while sending the invitation email",
                {"original_error": str(e)},
            ) from e

        if not result.success:
            logfire.warn(
                "Invitation email rejected by transport",
                email=invitation.email.root,
                error=result.error,
            )
            raise ExternalServiceError(
                result.error or "Failed to send invitation email",
                {"email": invitation.email.root},
            )

        return result
