"""Interface layer error mapping.

Translates domain errors into HTTP responses with the envelope

    {"error": {"message": str, "code": str, "details": {...}}}
"""

from typing import Any

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from adminvite.domain.error import DomainError, ErrorType

STATUS_BY_ERROR_TYPE: dict[ErrorType, int] = {
    ErrorType.PARAMETER_INVALID: status.HTTP_400_BAD_REQUEST,
    ErrorType.CONFIGURATION_MISSING: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorType.BUSINESS_RULE_VIOLATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorType.RESOURCE_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorType.REPOSITORY_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorType.EXTERNAL_SERVICE_FAILURE: status.HTTP_502_BAD_GATEWAY,
    ErrorType.UNKNOWN: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Messages shown instead of internal details for system-class errors
GENERIC_MESSAGES: dict[ErrorType, str] = {
    ErrorType.CONFIGURATION_MISSING: "Service is not configured",
    ErrorType.REPOSITORY_FAILURE: "Internal server error",
    ErrorType.EXTERNAL_SERVICE_FAILURE: "Failed to send invitation email",
    ErrorType.UNKNOWN: "Internal server error",
}


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    return STATUS_BY_ERROR_TYPE.get(
        error.error_type, status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def error_body(
    message: str, code: str, details: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Build the error envelope."""
    body: dict[str, Any] = {"message": message, "code": code}
    if details:
        body["details"] = details
    return {"error": body}


def domain_error_body(error: DomainError) -> dict[str, Any]:
    """Envelope for a domain error, hiding internals of system-class errors."""
    if error.user_facing:
        return error_body(error.message, error.error_type.value, error.details)
    return error_body(
        GENERIC_MESSAGES.get(error.error_type, "Internal server error"),
        error.error_type.value,
    )


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Render a DomainError."""
    status_code = status_for(exc)

    log = logfire.error if status_code >= 500 else logfire.warn
    log(
        "Request failed",
        path=request.url.path,
        status_code=status_code,
        error_type=exc.error_type.value,
        error=exc.message,
        details=exc.details,
    )
    return JSONResponse(status_code=status_code, content=domain_error_body(exc))


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render a request body validation failure as 400."""
    errors = [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]
    logfire.warn("Request validation failed", path=request.url.path, errors=errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            "Invalid request", ErrorType.PARAMETER_INVALID.value, {"errors": errors}
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Render anything that escaped the use case as 500."""
    logfire.exception(
        "Unhandled error",
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error", ErrorType.UNKNOWN.value),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on the app."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
