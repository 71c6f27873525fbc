"""Unit tests for domain error to HTTP mapping."""

import pytest

from adminvite.domain.error import (
    BusinessRuleViolationError,
    ConfigurationMissingError,
    DomainError,
    ExternalServiceError,
    ParameterInvalidError,
    RepositoryError,
    ResourceConflictError,
    UnknownError,
)
from adminvite.interface.error import domain_error_body, status_for


class TestStatusFor:
    """Tests for status_for."""

    @pytest.mark.parametrize(
        "error_class, expected",
        [
            (ParameterInvalidError, 400),
            (ResourceConflictError, 409),
            (BusinessRuleViolationError, 422),
            (ExternalServiceError, 502),
            (ConfigurationMissingError, 503),
            (RepositoryError, 500),
            (UnknownError, 500),
            (DomainError, 500),
        ],
    )
    def test_maps_error_kind_to_status(self, error_class, expected):
        assert status_for(error_class("failure")) == expected


class TestDomainErrorBody:
    """Tests for domain_error_body."""

    def test_user_facing_error_keeps_message_and_details(self):
        error = ParameterInvalidError(
            "Invalid email address format", {"value": "nope"}
        )

        assert domain_error_body(error) == {
            "error": {
                "message": "Invalid email address format",
                "code": "PARAMETER_INVALID",
                "details": {"value": "nope"},
            }
        }

    def test_details_omitted_when_empty(self):
        error = BusinessRuleViolationError("Invitation has expired")

        assert "details" not in domain_error_body(error)["error"]

    def test_system_error_hides_internals(self):
        error = RepositoryError(
            "Failed to save invitation", {"original_error": "password=secret"}
        )

        body = domain_error_body(error)

        assert body == {
            "error": {"message": "Internal server error", "code": "REPOSITORY_FAILURE"}
        }
