"""Translation of exceptions into HTTP error responses.

Every error leaving the API has the body::

    {"error": "<message>", "code": "<ERROR_CODE>"}

Domain exceptions keep their message and code. Request validation
failures become 400. Anything else is logged with its traceback and
answered with an opaque 500.

Usage:
    from userhub.presentation.api.exception_handlers import setup_exception_handlers

    setup_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from userhub.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal error occurred"

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PASSWORD_TOO_SHORT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Fallback for codes missing from the table, most specific first
_CATEGORY_STATUS: tuple[tuple[type[DomainException], int], ...] = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
)


def status_for(exc: DomainException) -> int:
    """HTTP status for a domain exception."""
    mapped = ERROR_CODE_TO_STATUS.get(exc.code)
    if mapped is not None:
        return mapped
    for category, status_code in _CATEGORY_STATUS:
        if isinstance(exc, category):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def error_response(status_code: int, message: str, code: ErrorCode) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "code": code.value},
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Summarize the first request validation error without echoing input."""
    errors = exc.errors()
    if not errors:
        return "invalid request"

    first = errors[0]
    location = [str(part) for part in first.get("loc", ())]
    if location and location[0] == "path":
        return "invalid user id" if "user_id" in location else "invalid path"

    field = ".".join(location[1:]) if len(location) > 1 else ""
    reason = first.get("msg", "invalid value")
    if field:
        return f"invalid request body: {field}: {reason}"
    return f"invalid request body: {reason}"


async def _on_request_validation_error(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    # Malformed ids and bodies are client errors; 400 rather than FastAPI's 422
    message = _describe_validation_error(exc)
    logger.info("%s %s rejected: %s", request.method, request.url.path, message)
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        message,
        ErrorCode.VALIDATION_ERROR,
    )


async def _on_domain_exception(request: Request, exc: DomainException) -> JSONResponse:
    logger.warning(
        "%s %s failed with %s: %s (details=%s)",
        request.method,
        request.url.path,
        exc.code.value,
        exc.message,
        exc.details,
    )
    return error_response(status_for(exc), exc.message, exc.code)


async def _on_unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
    """Storage and driver errors end up here.

    Their text goes to the log only, never into the response.
    """
    logger.exception("%s %s crashed: %s", request.method, request.url.path, exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        INTERNAL_ERROR_MESSAGE,
        ErrorCode.INTERNAL_ERROR,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the error translators on ``app``.

    Parameters
    ----------
    app
        Application returned by ``create_app``
    """
    app.add_exception_handler(RequestValidationError, _on_request_validation_error)
    app.add_exception_handler(DomainException, _on_domain_exception)
    app.add_exception_handler(Exception, _on_unhandled_exception)
