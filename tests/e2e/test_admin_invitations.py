"""End-to-end tests for the admin invitation endpoint."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from adminvite.config import EmailSettings, InvitationSettings
from adminvite.interface.api.app import create_app
from tests.di import build_test_container
from tests.settings import FRONTEND_URL, make_settings

ENDPOINT = "/api/admin-invitations"


def _client(unmock=None, **settings_overrides) -> TestClient:
    settings = make_settings(**settings_overrides)
    container = build_test_container(unmock=unmock, settings=settings)
    return TestClient(create_app(settings=settings, container=container))


@pytest.fixture
def client():
    """Create test client with every component mocked."""
    return _client()


class TestCreateAdminInvitation:
    """End-to-end tests for POST /api/admin-invitations."""

    def test_creates_invitation(self, client):
        response = client.post(ENDPOINT, json={"email": "admin@example.com"})

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["email"] == "admin@example.com"
        assert data["message"]
        assert "verification_link" not in data

    def test_reinvite_succeeds(self, client):
        first = client.post(ENDPOINT, json={"email": "admin@example.com"})
        second = client.post(ENDPOINT, json={"email": "Admin@Example.com"})

        assert first.status_code == 201
        assert second.status_code == 201
        assert second.json()["data"]["email"] == "admin@example.com"

    def test_development_response_includes_link(self):
        client = _client(environment="development")

        response = client.post(ENDPOINT, json={"email": "admin@example.com"})

        assert response.status_code == 201
        link = response.json()["data"]["verification_link"]
        assert link.startswith(f"{FRONTEND_URL}/admin/verify?token=")

    def test_invalid_email_is_400(self, client):
        response = client.post(ENDPOINT, json={"email": "invalid-email"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "PARAMETER_INVALID"
        assert error["message"] == "Invalid email address format"

    def test_missing_email_is_400(self, client):
        response = client.post(ENDPOINT, json={})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "PARAMETER_INVALID"

    def test_overlong_email_is_400(self, client):
        email = "a" * 250 + "@example.com"

        response = client.post(ENDPOINT, json={"email": email})

        assert response.status_code == 400

    def test_missing_frontend_url_is_503(self):
        client = _client(invitations=InvitationSettings(frontend_url=None))

        response = client.post(ENDPOINT, json={"email": "admin@example.com"})

        assert response.status_code == 503
        error = response.json()["error"]
        assert error["code"] == "CONFIGURATION_MISSING"
        assert "details" not in error

    def test_missing_resend_key_is_503(self):
        client = _client(unmock={"email"}, email=EmailSettings(resend_api_key=None))

        response = client.post(ENDPOINT, json={"email": "admin@example.com"})

        assert response.status_code == 503

    def test_email_provider_failure_is_502(self):
        client = _client(
            unmock={"email"}, email=EmailSettings(resend_api_key="re_test_key")
        )
        mock_response = MagicMock()
        mock_response.status_code = 500
        mock_response.text = "upstream unavailable"

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=mock_response
            )

            response = client.post(ENDPOINT, json={"email": "admin@example.com"})

        assert response.status_code == 502
        error = response.json()["error"]
        assert error["code"] == "EXTERNAL_SERVICE_FAILURE"
        assert "upstream unavailable" not in error["message"]

    def test_resend_success_is_201(self):
        client = _client(
            unmock={"email"}, email=EmailSettings(resend_api_key="re_test_key")
        )
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.json.return_value = {"id": "email_123"}

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=mock_response
            )

            response = client.post(ENDPOINT, json={"email": "admin@example.com"})

        assert response.status_code == 201


class TestHealth:
    """End-to-end tests for the health check."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "test"
