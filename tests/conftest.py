"""Test configuration and fixtures."""

from datetime import datetime, timezone

import logfire
import pytest

# Keep telemetry in-process and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def now() -> datetime:
    """A fixed, timezone-aware reference time."""
    return datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)
