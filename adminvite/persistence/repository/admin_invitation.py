"""PostgreSQL implementation of AdminInvitation repository."""

from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from adminvite.domain.error import ResourceConflictError
from adminvite.domain.model import AdminInvitation
from adminvite.domain.repository import AdminInvitationRepository
from adminvite.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
)
from adminvite.persistence.mappers import (
    admin_invitation_to_dict,
    row_to_admin_invitation,
)
from adminvite.persistence.tables import admin_invitations_table


class PostgresAdminInvitationRepository(AdminInvitationRepository):
    """PostgreSQL implementation of AdminInvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[AdminInvitation]:
        """Find an invitation by ID."""
        stmt = select(admin_invitations_table).where(
            admin_invitations_table.c.id == invitation_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_admin_invitation(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[AdminInvitation]:
        """Find the most recent invitation for an email address.

        Args:
            email: Invitee email, matched case-insensitively

        Returns:
            Invitation if found, None otherwise
        """
        stmt = (
            select(admin_invitations_table)
            .where(func.lower(admin_invitations_table.c.email) == email.normalized())
            .order_by(admin_invitations_table.c.created_at.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_admin_invitation(dict(row)) if row else None

    async def find_pending_by_email(self, email: Email) -> Optional[AdminInvitation]:
        """Find the pending invitation for an email address.

        Backed by the partial unique index on lower(email).

        Args:
            email: Invitee email, matched case-insensitively

        Returns:
            Pending invitation if found, None otherwise
        """
        stmt = select(admin_invitations_table).where(
            func.lower(admin_invitations_table.c.email) == email.normalized(),
            admin_invitations_table.c.status == InvitationStatus.PENDING.value,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_admin_invitation(dict(row)) if row else None

    async def find_by_token(self, token: InvitationToken) -> Optional[AdminInvitation]:
        """Find an invitation by its token.

        Args:
            token: Invitation token to look up

        Returns:
            Invitation if found, None otherwise
        """
        stmt = select(admin_invitations_table).where(
            admin_invitations_table.c.invitation_token == token.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_admin_invitation(dict(row)) if row else None

    async def save(self, invitation: AdminInvitation) -> AdminInvitation:
        """Save an invitation (create or update).

        The write is committed immediately so that failures later in the
        request (e.g. sending the email) leave the invitation stored.

        Args:
            invitation: Invitation to save

        Returns:
            Saved invitation with its id

        Raises:
            ResourceConflictError: If another pending invitation exists for
                the address or the token is already taken
        """
        if invitation.id is None:
            invitation = invitation.model_copy(update={"id": InvitationId(uuid4())})

        values = admin_invitation_to_dict(invitation)
        stmt = insert(admin_invitations_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[admin_invitations_table.c.id],
            set_={
                "email": stmt.excluded.email,
                "invitation_token": stmt.excluded.invitation_token,
                "expires_at": stmt.excluded.expires_at,
                "status": stmt.excluded.status,
                "updated_at": func.now(),
            },
        )

        try:
            await self.session.execute(stmt)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logfire.warn(
                "Invitation uniqueness violated",
                invitation_id=str(invitation.id),
                error=str(e.orig),
            )
            raise ResourceConflictError(
                "An active invitation already exists for this email",
                {"email": invitation.email.root},
            ) from e

        return invitation

    async def clear(self, ids: list[InvitationId] | None = None) -> None:
        """Delete the given invitations, or all of them."""
        stmt = delete(admin_invitations_table)
        if ids:
            stmt = stmt.where(admin_invitations_table.c.id.in_(ids))
        await self.session.execute(stmt)
        await self.session.commit()
