"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from adminvite.config import Settings
from adminvite.interface.api.routes import admin_invitations, health
from adminvite.interface.error import register_error_handlers
from adminvite.util.di.container import create_container, setup_di
from adminvite.util.observability import (
    SERVICE_VERSION,
    instrument_fastapi,
    instrument_httpx,
)


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        settings: Application settings (loaded from environment if omitted)
        container: DI container (built from settings if omitted)
    """
    settings = settings or Settings()

    # Instrument httpx for outbound HTTP requests (the Resend API)
    instrument_httpx()

    app_instance = FastAPI(
        title="Admin Invitation API",
        description="Issues single-use, time-limited admin signup invitations",
        version=SERVICE_VERSION,
        debug=settings.debug,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    allowed_origins = ["http://localhost:3000", "http://localhost:5173"]
    if settings.invitations.frontend_url:
        allowed_origins.insert(0, settings.invitations.frontend_url.rstrip("/"))

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    setup_di(app_instance, container or create_container(settings))

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(admin_invitations.router)

    return app_instance
