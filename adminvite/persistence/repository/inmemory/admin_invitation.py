"""In-memory admin invitation repository for testing."""

from typing import Optional
from uuid import uuid4

from adminvite.domain.error import ResourceConflictError
from adminvite.domain.model import AdminInvitation
from adminvite.domain.repository import AdminInvitationRepository
from adminvite.domain.value import Email, InvitationId, InvitationToken


class InMemoryAdminInvitationRepository(AdminInvitationRepository):
    """In-memory implementation of AdminInvitationRepository for testing."""

    def __init__(self) -> None:
        self._invitations: dict[InvitationId, AdminInvitation] = {}

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[AdminInvitation]:
        """Find an invitation by ID."""
        return self._invitations.get(invitation_id)

    async def find_by_email(self, email: Email) -> Optional[AdminInvitation]:
        """Find the most recent invitation for an email."""
        matches = [inv for inv in self._invitations.values() if inv.email == email]
        if not matches:
            return None
        return max(matches, key=lambda inv: inv.created_at)

    async def find_pending_by_email(self, email: Email) -> Optional[AdminInvitation]:
        """Find the pending invitation for an email."""
        for invitation in self._invitations.values():
            if invitation.email == email and invitation.status.is_pending():
                return invitation
        return None

    async def find_by_token(self, token: InvitationToken) -> Optional[AdminInvitation]:
        """Find an invitation by its token."""
        for invitation in self._invitations.values():
            if invitation.invitation_token == token:
                return invitation
        return None

    async def save(self, invitation: AdminInvitation) -> AdminInvitation:
        """Save an invitation (create or update).

        Raises:
            ResourceConflictError: If another pending invitation exists for
                the address or the token is already taken
        """
        if invitation.id is None:
            invitation = invitation.model_copy(update={"id": InvitationId(uuid4())})

        for existing in self._invitations.values():
            if existing.id == invitation.id:
                continue
            if existing.invitation_token == invitation.invitation_token or (
                invitation.status.is_pending()
                and existing.status.is_pending()
                and existing.email == invitation.email
            ):
                raise ResourceConflictError(
                    "An active invitation already exists for this email",
                    {"email": invitation.email.root},
                )

        self._invitations[invitation.id] = invitation
        return invitation

    async def clear(self, ids: list[InvitationId] | None = None) -> None:
        """Delete the given invitations, or all of them."""
        if ids:
            for invitation_id in ids:
                self._invitations.pop(invitation_id, None)
        else:
            self._invitations.clear()

    def all(self) -> list[AdminInvitation]:
        """All stored invitations (test helper)."""
        return list(self._invitations.values())
