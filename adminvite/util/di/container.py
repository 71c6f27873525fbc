"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
import logfire

from adminvite.config import Settings
from adminvite.util.di import PROVIDERS, Component, get_provider


def mocked_components(settings: Settings) -> set[Component]:
    """Components that settings ask to run with in-process fakes.

    Args:
        settings: Application settings

    Returns:
        Names of components to mock
    """
    mocked: set[Component] = set()
    if settings.database.use_mock:
        mocked.add("persistence")
    if settings.email.use_mock:
        mocked.add("email")
    return mocked


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build the application container.

    Production implementations are used unless settings switch a component
    to its mock (``DATABASE__USE_MOCK``, ``EMAIL__USE_MOCK``).

    Args:
        settings: Application settings (loaded from environment if omitted)

    Returns:
        Configured DI container
    """
    settings = settings or Settings()
    mocked = mocked_components(settings)

    provider_instances = []
    for base in PROVIDERS:
        use_mock = base.is_mockable() and base.__mock_component__ in mocked
        provider_instances.append(get_provider(base, use_mock=use_mock)())

    logfire.info(
        "DI container created",
        environment=settings.environment,
        mocked_components=sorted(mocked),
    )

    # Include FastapiProvider for proper integration with FastAPI
    return make_async_container(
        *provider_instances,
        FastapiProvider(),
        context={Settings: settings},
    )


def setup_di(app, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
