"""
Exception handlers for the FastAPI application.

Every error is rendered with the same envelope:

    {"error": {"code", "message", "details"}, "meta": {"request_id"}}

Store failures never echo backend messages, and credential failures
share one message.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from authcore.application.exceptions import (
    ApplicationError,
    ConflictError,
    CredentialError,
    NotFoundError,
    PasswordHashingError,
    PasswordVerificationError,
    StoreError,
    StoreTimeoutError,
    TokenError,
    ValidationError,
)
from authcore.domain.exceptions import DomainException, PermissionDomainException


logger = logging.getLogger(__name__)

# Most specific class first
STATUS_BY_ERROR: list[tuple[type[ApplicationError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
    (CredentialError, status.HTTP_401_UNAUTHORIZED),
    (TokenError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (StoreTimeoutError, status.HTTP_504_GATEWAY_TIMEOUT),
    (StoreError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (PasswordHashingError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (PasswordVerificationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: ApplicationError) -> int:
    for error_class, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details=None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details if details is not None else {},
            },
            "meta": {
                "request_id": getattr(request.state, "request_id", None),
            },
        },
        headers=headers,
    )


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    """
    Handle application layer errors.

    Credential and token errors get a ``WWW-Authenticate`` header; store
    errors are reported by code only.
    """
    status_code = status_for(exc)
    request_id = getattr(request.state, "request_id", "unknown")
    headers = None

    if isinstance(exc, CredentialError):
        # Disabled accounts are a 403 once the caller proved the password
        if exc.error_code == "ACCOUNT_DISABLED":
            status_code = status.HTTP_403_FORBIDDEN
        else:
            headers = {"WWW-Authenticate": "Bearer"}
        logger.warning(
            "Credential error %s (reason=%s, request_id=%s)",
            exc.error_code,
            exc.reason,
            request_id,
        )
    elif isinstance(exc, TokenError):
        headers = {"WWW-Authenticate": "Bearer"}
        logger.warning("Token error %s (request_id=%s)", exc.error_code, request_id)
    elif status_code >= 500:
        logger.error("Application error %s (request_id=%s)", exc, request_id)
    else:
        logger.info("Application error %s (request_id=%s)", exc, request_id)

    if isinstance(exc, StoreError):
        return error_response(
            request,
            status_code,
            exc.error_code,
            "A storage backend is unavailable. Please retry later.",
            headers=headers,
        )

    return error_response(
        request, status_code, exc.error_code, exc.message, exc.details, headers=headers
    )


async def domain_error_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Handle domain errors that escaped the use cases (authorization checks mostly)."""
    if isinstance(exc, PermissionDomainException):
        logger.warning(
            "Access denied: %s (request_id=%s)",
            exc.message,
            getattr(request.state, "request_id", "unknown"),
        )
        return error_response(
            request, status.HTTP_403_FORBIDDEN, exc.code, "Insufficient permissions"
        )

    return error_response(request, status.HTTP_400_BAD_REQUEST, exc.code, exc.message)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request body/parameter validation errors."""
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logger.info(
        "Request validation failed: %d error(s) (request_id=%s)",
        len(errors),
        getattr(request.state, "request_id", "unknown"),
    )

    return error_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        "Request validation failed",
        errors,
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Logs the full error and returns a generic response.
    """
    logger.error(
        "Unexpected error (request_id=%s)",
        getattr(request.state, "request_id", "unknown"),
        exc_info=exc,
    )

    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "An unexpected error occurred.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(DomainException, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
