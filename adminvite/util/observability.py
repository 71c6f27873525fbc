"""Observability configuration using Logfire.

Application code logs through Logfire directly:

    import logfire

    logfire.info("Invitation created", email=email, expires_at=expires_at)

    with logfire.span("create_admin_invitation", email=email):
        ...

This module configures Logfire once per process and instruments FastAPI,
SQLAlchemy and httpx.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from adminvite.config import Settings

SERVICE_NAME = "adminvite"
SERVICE_VERSION = "0.1.0"


def should_send_to_logfire(settings: Settings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise telemetry is
    sent only when a token is configured.
    """
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app, except health checks.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(app, excluded_urls="/health")
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Trace outbound HTTP requests (the Resend API)."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
