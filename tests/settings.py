"""Settings used across tests."""

from adminvite.config import InvitationSettings, Settings

FRONTEND_URL = "https://admin.example.com"


def make_settings(**overrides) -> Settings:
    """Test settings with a configured frontend URL.

    Args:
        **overrides: Settings fields to replace

    Returns:
        Settings for the test environment
    """
    values = {
        "environment": "test",
        "invitations": InvitationSettings(frontend_url=FRONTEND_URL),
    }
    values.update(overrides)
    return Settings(**values)
