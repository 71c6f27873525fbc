"""Domain value objects."""

from adminvite.domain.value.identifiers import InvitationId, parse_invitation_id
from adminvite.domain.value.types import (
    Email,
    InvitationStatus,
    InvitationToken,
)

__all__ = [
    # Identifiers
    "InvitationId",
    "parse_invitation_id",
    # Types
    "Email",
    "InvitationStatus",
    "InvitationToken",
]
