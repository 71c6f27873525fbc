"""Admin invitation entity.

An invitation grants the holder of its token the right to sign up for an
admin account until it expires. Re-inviting the same address while an
invitation is pending refreshes that invitation instead of issuing a new
token.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

from pydantic import Field, ValidationError, field_validator

from adminvite.domain.error import BusinessRuleViolationError, ParameterInvalidError
from adminvite.domain.model.common import DomainModel
from adminvite.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    parse_invitation_id,
)
from adminvite.domain.value.common import validation_message

INVITATION_VALIDITY_HOURS = 24

# Pending invitations closer than this to expiry get a fresh window
EXTENSION_THRESHOLD_HOURS = 2


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class AdminInvitation(DomainModel):
    """Admin invitation entity.

    Business rules:
    - A new invitation is pending and expires 24 hours after creation
    - Status only moves pending -> accepted or pending -> expired
    - An invitation is valid while pending and not past its expiry
    - Extending never moves the expiry backwards and keeps the token

    Every transition returns a new instance; the receiver is left untouched.
    """

    id: InvitationId | None = None  # Assigned by persistence on first save
    email: Email
    invitation_token: InvitationToken
    expires_at: datetime
    status: InvitationStatus = InvitationStatus.PENDING
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("expires_at", "created_at")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Interpret naive datetimes as UTC."""
        return v if v.tzinfo else v.replace(tzinfo=timezone.utc)

    @classmethod
    def create_new(cls, email: str, now: datetime | None = None) -> "AdminInvitation":
        """Create a fresh pending invitation for ``email``.

        Args:
            email: Invitee email address
            now: Creation time (defaults to the current time)

        Returns:
            Unsaved invitation with a new token

        Raises:
            ParameterInvalidError: If the email is invalid
        """
        now = now or utcnow()
        return cls(
            id=None,
            email=Email.create(email),
            invitation_token=InvitationToken.generate(),
            expires_at=now + timedelta(hours=INVITATION_VALIDITY_HOURS),
            status=InvitationStatus.PENDING,
            created_at=now,
        )

    @classmethod
    def create(
        cls,
        id: Any,
        email: str,
        invitation_token: str,
        expires_at: Any,
        status: str,
        created_at: Any = None,
    ) -> "AdminInvitation":
        """Rebuild an invitation from stored values.

        Raises:
            ParameterInvalidError: If any value is invalid
        """
        fields: dict[str, Any] = {
            "id": parse_invitation_id(id),
            "email": Email.create(email),
            "invitation_token": InvitationToken.create(invitation_token),
            "expires_at": expires_at,
            "status": InvitationStatus.create(status),
        }
        if created_at is not None:
            fields["created_at"] = created_at

        try:
            return cls(**fields)
        except ValidationError as e:
            field = e.errors()[0]["loc"][0]
            raise ParameterInvalidError(
                validation_message(e),
                {"field": field, "value": fields.get(str(field))},
            ) from e

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or utcnow()) > self.expires_at

    def is_valid(self, now: datetime | None = None) -> bool:
        """Pending and not past its expiry."""
        now = now or utcnow()
        return self.status.is_pending() and not self.is_expired(now)

    def remaining_hours(self, now: datetime | None = None) -> float:
        """Hours until expiry; negative once expired."""
        return (self.expires_at - (now or utcnow())).total_seconds() / 3600

    def should_extend_expiration(self, now: datetime | None = None) -> bool:
        return self.remaining_hours(now) < EXTENSION_THRESHOLD_HOURS

    def extend_expiration(
        self, hours: float, now: datetime | None = None
    ) -> "AdminInvitation":
        """Push the expiry to ``hours`` from now.

        The expiry never moves backwards: if it is already later than the
        requested time it is kept, so the expiry strictly increases only when
        ``now + hours`` is later than the current expiry.

        Raises:
            ParameterInvalidError: If ``hours`` is not positive
        """
        if hours <= 0:
            raise ParameterInvalidError(
                "Extension hours must be a positive number", {"hours": hours}
            )

        requested = (now or utcnow()) + timedelta(hours=hours)
        return self.model_copy(
            update={"expires_at": max(self.expires_at, requested)}
        )

    def accept(self) -> "AdminInvitation":
        self._ensure_pending("accept")
        return self.model_copy(update={"status": InvitationStatus.ACCEPTED})

    def expire(self) -> "AdminInvitation":
        self._ensure_pending("expire")
        return self.model_copy(update={"status": InvitationStatus.EXPIRED})

    def _ensure_pending(self, action: str) -> None:
        if not self.status.is_pending():
            raise BusinessRuleViolationError(
                f"Cannot {action} an invitation that is {self.status.value}",
                {"status": self.status.value},
            )
