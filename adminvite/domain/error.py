"""Domain layer errors."""

from enum import Enum
from typing import Any, ClassVar


class ErrorType(str, Enum):
    """Kinds of failure the service distinguishes."""

    PARAMETER_INVALID = "PARAMETER_INVALID"
    CONFIGURATION_MISSING = "CONFIGURATION_MISSING"
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    RESOURCE_CONFLICT = "RESOURCE_CONFLICT"
    REPOSITORY_FAILURE = "REPOSITORY_FAILURE"
    EXTERNAL_SERVICE_FAILURE = "EXTERNAL_SERVICE_FAILURE"
    UNKNOWN = "UNKNOWN"


class DomainError(Exception):
    """Base domain error.

    Attributes:
        error_type: Kind of failure
        message: Human readable message
        details: Optional structured context (offending values, original error)
    """

    error_type: ClassVar[ErrorType] = ErrorType.UNKNOWN

    # System-class errors must not leak their message or details to clients
    user_facing: ClassVar[bool] = False

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ParameterInvalidError(DomainError):
    """A value failed validation."""

    error_type = ErrorType.PARAMETER_INVALID
    user_facing = True


class ConfigurationMissingError(DomainError):
    """Required configuration is absent."""

    error_type = ErrorType.CONFIGURATION_MISSING


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    error_type = ErrorType.BUSINESS_RULE_VIOLATION
    user_facing = True


class ResourceConflictError(DomainError):
    """The resource already exists in a conflicting form."""

    error_type = ErrorType.RESOURCE_CONFLICT
    user_facing = True


class RepositoryError(DomainError):
    """Persistence layer failure."""

    error_type = ErrorType.REPOSITORY_FAILURE


class ExternalServiceError(DomainError):
    """An outbound collaborator (email transport) failed."""

    error_type = ErrorType.EXTERNAL_SERVICE_FAILURE


class UnknownError(DomainError):
    """Anything not otherwise classified."""

    error_type = ErrorType.UNKNOWN
