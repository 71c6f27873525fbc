"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from adminvite.config import Settings
from adminvite.util.di import PROVIDERS, Component, get_provider
from tests.settings import make_settings


def build_test_container(
    unmock: set[Component] | None = None, settings: Settings | None = None
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Unlike the application container, mocking here is chosen by the test,
    not by settings.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks.
        settings: Settings to expose through the container (test settings
                  with a frontend URL by default)

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real persistence
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        use_mock = base.is_mockable() and base.__mock_component__ not in unmock
        provider_instances.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(
        *provider_instances,
        FastapiProvider(),
        context={Settings: settings or make_settings()},
    )


def _validate_unmock(unmock: set[Component]) -> None:
    """Validate unmock configuration.

    Args:
        unmock: Set of components to unmock

    Raises:
        ValueError: If unknown components are requested
    """
    all_components = {p.__mock_component__ for p in PROVIDERS if p.is_mockable()}

    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
