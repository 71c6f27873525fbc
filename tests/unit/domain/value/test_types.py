"""Unit tests for invitation value objects."""

from uuid import UUID

import pytest

from adminvite.domain.error import ErrorType, ParameterInvalidError
from adminvite.domain.value import (
    Email,
    InvitationStatus,
    InvitationToken,
    parse_invitation_id,
)


class TestEmail:
    """Tests for Email value object."""

    @pytest.mark.parametrize(
        "address",
        [
            "admin@example.com",
            "first.last+tag@sub.example.co.jp",
            "a_b%c-d@example-host.io",
        ],
    )
    def test_accepts_valid_addresses(self, address):
        """Well-formed addresses should be accepted unchanged."""
        email = Email.create(address)

        assert email.root == address
        assert str(email) == address

    def test_empty_address_is_required(self):
        """Empty string should be rejected as missing."""
        with pytest.raises(ParameterInvalidError) as exc_info:
            Email.create("")

        assert exc_info.value.message == "Email address is required"
        assert exc_info.value.error_type == ErrorType.PARAMETER_INVALID
        assert exc_info.value.details["value_object_type"] == "Email"

    @pytest.mark.parametrize(
        "address",
        [
            "invalid-email",
            "no-at-sign.example.com",
            "user@localhost",
            "user@example.c",
            "user name@example.com",
        ],
    )
    def test_rejects_malformed_addresses(self, address):
        """Malformed addresses should raise ParameterInvalidError."""
        with pytest.raises(ParameterInvalidError) as exc_info:
            Email.create(address)

        assert exc_info.value.message == "Invalid email address format"
        assert exc_info.value.details["value"] == address

    def test_254_characters_is_allowed(self):
        """The maximum length itself is allowed."""
        address = "a" * 242 + "@example.com"
        assert len(address) == 254

        assert Email.create(address).root == address

    def test_255_characters_is_rejected(self):
        """Anything longer than 254 characters is rejected."""
        address = "a" * 243 + "@example.com"

        with pytest.raises(ParameterInvalidError) as exc_info:
            Email.create(address)

        assert "254" in exc_info.value.message

    def test_comparison_is_case_insensitive(self):
        """Emails differing only in case should be equal and hash alike."""
        lower = Email.create("admin@example.com")
        mixed = Email.create("Admin@Example.COM")

        assert lower == mixed
        assert hash(lower) == hash(mixed)
        assert mixed.normalized() == "admin@example.com"
        # Original spelling preserved
        assert mixed.root == "Admin@Example.COM"

    def test_email_is_immutable(self):
        """Value objects should be frozen."""
        email = Email.create("admin@example.com")

        with pytest.raises(Exception):
            email.root = "other@example.com"


class TestInvitationToken:
    """Tests for InvitationToken value object."""

    def test_generate_produces_url_safe_unique_tokens(self):
        """Generated tokens should be URL-safe and distinct."""
        tokens = {InvitationToken.generate().root for _ in range(50)}

        assert len(tokens) == 50
        for token in tokens:
            assert len(token) >= 32
            assert all(c.isalnum() or c in "-_" for c in token)

    def test_blank_token_is_rejected(self):
        """Blank tokens should raise ParameterInvalidError."""
        with pytest.raises(ParameterInvalidError):
            InvitationToken.create("   ")

    def test_overlong_token_is_rejected(self):
        """Tokens longer than the column width should be rejected."""
        with pytest.raises(ParameterInvalidError):
            InvitationToken.create("x" * 256)

    def test_tokens_compare_by_value(self):
        """Tokens with the same value should be equal."""
        assert InvitationToken.create("abc") == InvitationToken.create("abc")
        assert InvitationToken.create("abc") != InvitationToken.create("abd")


class TestInvitationStatus:
    """Tests for InvitationStatus."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("pending", InvitationStatus.PENDING),
            ("accepted", InvitationStatus.ACCEPTED),
            ("expired", InvitationStatus.EXPIRED),
        ],
    )
    def test_create_parses_known_values(self, value, expected):
        """Known status strings should parse."""
        assert InvitationStatus.create(value) is expected

    def test_create_rejects_unknown_value(self):
        """Unknown status strings should raise ParameterInvalidError."""
        with pytest.raises(ParameterInvalidError) as exc_info:
            InvitationStatus.create("revoked")

        assert "revoked" in exc_info.value.message

    def test_predicates(self):
        """Each predicate should be true only for its own status."""
        assert InvitationStatus.PENDING.is_pending()
        assert not InvitationStatus.PENDING.is_accepted()
        assert InvitationStatus.ACCEPTED.is_accepted()
        assert not InvitationStatus.ACCEPTED.is_expired()
        assert InvitationStatus.EXPIRED.is_expired()
        assert not InvitationStatus.EXPIRED.is_pending()


class TestParseInvitationId:
    """Tests for parse_invitation_id."""

    def test_none_means_unsaved(self):
        assert parse_invitation_id(None) is None

    def test_parses_uuid_string(self):
        value = "6f1c2a4e-8a39-4a53-9f0e-2d7b1c7d9a10"

        assert parse_invitation_id(value) == UUID(value)

    def test_rejects_non_uuid(self):
        with pytest.raises(ParameterInvalidError):
            parse_invitation_id("not-a-uuid")
