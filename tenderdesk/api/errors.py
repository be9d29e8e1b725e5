"""Map domain and framework errors onto ``{"message": ...}`` JSON bodies."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from tenderdesk.core.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    TenderDeskException,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[TenderDeskException], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
)
_LOCATION_ROOTS = {"body", "query", "path", "header"}


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None, **extra: Any) -> JSONResponse:
    content: dict[str, Any] = {"message": message}
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def format_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Render pydantic error entries as ``field: reason`` pairs."""
    parts = []
    for error in errors:
        field = ".".join(str(part) for part in error.get("loc", ()) if part not in _LOCATION_ROOTS)
        reason = error.get("msg", "invalid value")
        parts.append(f"{field}: {reason}" if field else reason)
    return "; ".join(parts) or "Invalid request."


def _status_for(exc: TenderDeskException) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_domain_error(request: Request, exc: TenderDeskException) -> JSONResponse:
    status_code = _status_for(exc)
    if status_code >= 500:
        logger.error(
            "api.domain_error",
            extra={"event": "api.domain_error", "path": request.url.path, "error_type": type(exc).__name__},
        )
        return error_response(status_code, "Internal server error")
    extra = exc.details if isinstance(exc, ConflictError) else {}
    return error_response(status_code, str(exc), **extra)


async def handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning(
        "api.integrity_violation",
        extra={"event": "api.integrity_violation", "path": request.url.path, "detail": str(exc.orig)},
    )
    return error_response(status.HTTP_400_BAD_REQUEST, "Operation violates a uniqueness or reference constraint.")


async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("api.database_error", extra={"event": "api.database_error", "path": request.url.path})
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "api.unhandled_error",
        extra={"event": "api.unhandled_error", "path": request.url.path, "error_type": type(exc).__name__},
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, format_validation_errors(exc.errors()))


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TenderDeskException, handle_domain_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
