"""Admin invitation repository interfaces."""

from abc import ABC, abstractmethod

from adminvite.domain.model.admin_invitation import AdminInvitation
from adminvite.domain.value import Email, InvitationId, InvitationToken


class LoadAdminInvitationPort(ABC):
    """Read side of invitation persistence."""

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> AdminInvitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: Identifier assigned on first save

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> AdminInvitation | None:
        """Find the most recent invitation for an email, whatever its status.

        Args:
            email: Invitee email (matched case-insensitively)

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending_by_email(self, email: Email) -> AdminInvitation | None:
        """Find the pending invitation for an email.

        Matches on the stored status only; an invitation whose expiry has
        passed without being transitioned is still returned.

        Args:
            email: Invitee email (matched case-insensitively)

        Returns:
            The pending invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InvitationToken) -> AdminInvitation | None:
        """Find an invitation by token.

        Used when the invitee opens the verification link.

        Args:
            token: The invitation token

        Returns:
            The invitation if found, None otherwise
        """
        pass


class SaveAdminInvitationPort(ABC):
    """Write side of invitation persistence."""

    @abstractmethod
    async def save(self, invitation: AdminInvitation) -> AdminInvitation:
        """Save an invitation (create or update).

        Invitations without an id are assigned one.

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation, with its id set

        Raises:
            ResourceConflictError: If a uniqueness rule would be broken
        """
        pass


class RepositoryTestSupport(ABC):
    """Fixture cleanup for tests running against a real store."""

    @abstractmethod
    async def clear(self, ids: list[InvitationId] | None = None) -> None:
        """Delete invitations.

        Args:
            ids: Invitations to delete; all invitations when omitted
        """
        pass


class AdminInvitationRepository(
    LoadAdminInvitationPort, SaveAdminInvitationPort, RepositoryTestSupport
):
    """Repository for AdminInvitation entity.

    Defines the contract for invitation persistence operations.
    Implementations live in the infrastructure layer.
    """
