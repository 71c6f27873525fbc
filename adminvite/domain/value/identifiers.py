"""Strongly typed identifiers for domain entities."""

from typing import NewType
from uuid import UUID

from adminvite.domain.error import ParameterInvalidError

InvitationId = NewType("InvitationId", UUID)


def parse_invitation_id(value: UUID | str | None) -> InvitationId | None:
    """Parse an invitation identifier.

    ``None`` means the invitation has not been persisted yet.

    Raises:
        ParameterInvalidError: If the value is not a UUID
    """
    if value is None:
        return None
    if isinstance(value, UUID):
        return InvitationId(value)
    try:
        return InvitationId(UUID(str(value)))
    except ValueError as e:
        raise ParameterInvalidError(
            "Invitation id must be a UUID",
            {"value": value, "value_object_type": "InvitationId"},
        ) from e
