"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
import secrets
from enum import Enum

from pydantic import field_validator

from adminvite.domain.error import ParameterInvalidError
from adminvite.domain.value.common import RootValueObject

# RFC 5321 limits a forward path to 254 characters
MAX_EMAIL_LENGTH = 254

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


class Email(RootValueObject[str]):
    """Email address of an invitee.

    Compared case-insensitively; the original spelling is preserved.
    """

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate length and basic address shape."""
        if not v:
            raise ValueError("Email address is required")
        if len(v) > MAX_EMAIL_LENGTH:
            raise ValueError(
                f"Email address must be at most {MAX_EMAIL_LENGTH} characters"
            )
        if not EMAIL_PATTERN.fullmatch(v):
            raise ValueError("Invalid email address format")
        return v

    def normalized(self) -> str:
        """Lowercased address, used for lookups."""
        return self.root.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Email):
            return NotImplemented
        return self.normalized() == other.normalized()

    def __hash__(self) -> int:
        return hash(self.normalized())


class InvitationToken(RootValueObject[str]):
    """Opaque URL-safe invitation token."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not blank."""
        if not v.strip():
            raise ValueError("Invitation token must not be blank")
        if len(v) > 255:
            raise ValueError("Invitation token must be at most 255 characters")
        return v

    @classmethod
    def generate(cls) -> "InvitationToken":
        """Generate a fresh random token."""
        return cls(secrets.token_urlsafe(32))


class InvitationStatus(str, Enum):
    """Lifecycle status of an invitation.

    ``pending`` is the only non-terminal state.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"

    @classmethod
    def create(cls, value: str) -> "InvitationStatus":
        """Parse a status value.

        Raises:
            ParameterInvalidError: If the value is not a known status
        """
        try:
            return cls(value)
        except ValueError as e:
            raise ParameterInvalidError(
                f"Unknown invitation status: {value}",
                {"value": value, "value_object_type": cls.__name__},
            ) from e

    def is_pending(self) -> bool:
        return self is InvitationStatus.PENDING

    def is_accepted(self) -> bool:
        return self is InvitationStatus.ACCEPTED

    def is_expired(self) -> bool:
        return self is InvitationStatus.EXPIRED
