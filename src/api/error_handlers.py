# This file defines the API error taxonomy and the exception handlers that render it.
# Every failure leaves the service with the same body shape plus request trace fields.
# Unexpected failures are logged server-side and reach the client only as "internal error".

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.api.db_access import StoreError

LOGGER = logging.getLogger("api")

INTERNAL_ERROR_MESSAGE = "internal error"


class APIError(Exception):
    """Domain error type with structured API details."""

    def __init__(
        self,
        *,
        status_code: int,
        error_code: str,
        message: str,
        details: Any | None = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(APIError):
    def __init__(self, message: str = "invalid request", details: Any | None = None) -> None:
        super().__init__(
            status_code=400, error_code="VALIDATION_ERROR", message=message, details=details
        )


class NotFoundError(APIError):
    def __init__(self, message: str = "not found") -> None:
        super().__init__(status_code=404, error_code="NOT_FOUND", message=message)


class ConflictError(APIError):
    """Unique-constraint violation (duplicate email or slug)."""

    def __init__(self, message: str) -> None:
        super().__init__(status_code=400, error_code="CONFLICT", message=message)


class ReferentialError(APIError):
    """A reference between rows does not hold (missing author, author still in use)."""

    def __init__(self, message: str) -> None:
        super().__init__(status_code=400, error_code="REFERENTIAL_ERROR", message=message)


class InternalError(APIError):
    def __init__(self) -> None:
        super().__init__(status_code=500, error_code="INTERNAL_ERROR", message=INTERNAL_ERROR_MESSAGE)


def _request_id(request: Request) -> str:
    return str(getattr(request.state, "request_id", "unknown"))


def _error_body(
    *, request: Request, error_code: str, message: str, details: Any | None = None
) -> dict[str, Any]:
    return {
        "error": message,
        "error_code": error_code,
        "details": details,
        "request_id": _request_id(request),
        "timestamp": datetime.now(tz=UTC).isoformat(),
    }


def _validation_details(exc: RequestValidationError) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": str(error.get("msg", "")),
        }
        for error in exc.errors()
    ]


def _internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.error(
        "Unhandled failure method=%s path=%s request_id=%s",
        request.method,
        request.url.path,
        _request_id(request),
        exc_info=exc,
    )
    error = InternalError()
    return JSONResponse(
        status_code=error.status_code,
        content=_error_body(request=request, error_code=error.error_code, message=error.message),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(
                request=request,
                error_code=exc.error_code,
                message=exc.message,
                details=exc.details,
            ),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=_error_body(
                request=request,
                error_code="VALIDATION_ERROR",
                message="invalid request",
                details=_validation_details(exc),
            ),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(
                request=request,
                error_code="HTTP_ERROR",
                message=str(exc.detail),
            ),
        )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        return _internal_error_response(request, exc)

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        return _internal_error_response(request, exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        return _internal_error_response(request, exc)
