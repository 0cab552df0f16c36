"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from stackit.domain.error import (
    BusinessRuleViolationError,
    ConcurrencyConflictError,
    DomainError,
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from stackit.util.jwt import JWTError

# Checked in order, first match wins
STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_400_BAD_REQUEST),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (JWTError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConcurrencyConflictError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def status_for(error: Exception) -> int:
    """Map an exception to its HTTP status code."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    """Render a domain or token error as ``{"detail": ..., "field"?: ...}``."""
    status_code = status_for(exc)
    body: dict[str, str] = {}

    if isinstance(exc, ValidationError):
        body["detail"] = exc.message
        body["field"] = exc.field
    elif isinstance(exc, NotAuthorizedError):
        body["detail"] = "Forbidden"
    else:
        body["detail"] = str(exc)

    logfire.info(
        "Request failed",
        path=request.url.path,
        status_code=status_code,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return JSONResponse(status_code=status_code, content=body)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception and hide its details from the client."""
    logfire.exception(
        "Unhandled error", path=request.url.path, error_type=type(exc).__name__
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on the application."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(JWTError, handle_domain_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
