"""Base class for value objects."""

from typing import Any, Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel, ValidationError

from adminvite.domain.error import ParameterInvalidError


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
    )


T = TypeVar("T")


def validation_message(exc: ValidationError) -> str:
    """Extract the first human readable message from a Pydantic error.

    Messages raised as ``ValueError`` inside validators are returned verbatim,
    without Pydantic's ``Value error,`` prefix.
    """
    error = exc.errors()[0]
    original = error.get("ctx", {}).get("error")
    return str(original) if original is not None else error["msg"]


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    RootValueObject uses Pydantic's RootModel, which means:
    - The model wraps a single value (accessed via .root)
    - model_dump() automatically returns the primitive value, not a dict
    - Perfect for simple wrappers like Email or InvitationToken

    Use ``create`` to build one from untrusted input: it is the single place
    where validation failures become ``ParameterInvalidError``.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
    )

    @classmethod
    def create(cls, value: Any) -> Self:
        """Validate ``value`` and wrap it.

        Raises:
            ParameterInvalidError: If the value is rejected
        """
        try:
            return cls(value)
        except ValidationError as e:
            raise ParameterInvalidError(
                validation_message(e),
                {"value": value, "value_object_type": cls.__name__},
            ) from e

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)
