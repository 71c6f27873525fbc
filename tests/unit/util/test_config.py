"""Unit tests for settings and container selection."""

import pytest
from pydantic import ValidationError

from adminvite.config import DatabaseSettings, EmailSettings, Settings
from adminvite.util.di import (
    EmailProvider,
    MockEmailProvider,
    MockPersistenceProvider,
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from adminvite.util.di.container import mocked_components


class TestSettings:
    """Tests for Settings validation."""

    def test_test_environment_forces_mock_email(self):
        settings = Settings(environment="test", email=EmailSettings(use_mock=False))

        assert settings.email.use_mock is True

    def test_production_requires_resend_key(self):
        with pytest.raises(ValidationError, match="EMAIL__RESEND_API_KEY"):
            Settings(environment="production", email=EmailSettings())

    def test_production_with_mock_email_needs_no_key(self):
        settings = Settings(
            environment="production", email=EmailSettings(use_mock=True)
        )

        assert settings.email.resend_api_key is None

    def test_nested_values_from_environment(self, monkeypatch):
        monkeypatch.setenv("INVITATIONS__FRONTEND_URL", "https://admin.example.com")
        monkeypatch.setenv("EMAIL__USE_MOCK", "true")

        settings = Settings()

        assert settings.invitations.frontend_url == "https://admin.example.com"
        assert settings.email.use_mock is True

    def test_is_development(self):
        assert Settings(environment="development").is_development
        assert not Settings(environment="test").is_development


class TestMockedComponents:
    """Tests for mocked_components."""

    def test_production_defaults_mock_nothing(self):
        settings = Settings(
            environment="development",
            database=DatabaseSettings(use_mock=False),
            email=EmailSettings(use_mock=False),
        )

        assert mocked_components(settings) == set()

    def test_flags_select_mocks(self):
        settings = Settings(
            environment="development",
            database=DatabaseSettings(use_mock=True),
            email=EmailSettings(use_mock=True),
        )

        assert mocked_components(settings) == {"persistence", "email"}


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_is_returned_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider
        assert get_provider(ProdConfigProvider, use_mock=True) is ProdConfigProvider

    def test_mockable_component_selects_implementation(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
        assert get_provider(EmailProvider, use_mock=True) is MockEmailProvider
