# This file defines consistent API error payloads and exception handlers.
# It exists so every endpoint returns the same error shape with request trace fields.
# The handlers translate validation, HTTP, and unexpected failures into safe client messages.
# Request validation failures are client errors here and always map to 400.

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

INTERNAL_ERROR_MESSAGE = "The server encountered an unexpected error."


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


def _request_id(request: Request) -> str:
    return str(getattr(request.state, "request_id", "unknown"))


def _error_body(
    *, request: Request, error_code: str, message: str, details: Any | None = None
) -> dict[str, Any]:
    return {
        "error_code": error_code,
        "message": message,
        "details": details,
        "request_id": _request_id(request),
        "timestamp": datetime.now(tz=UTC).isoformat(),
    }


def _validation_details(errors: Sequence[Any]) -> list[dict[str, Any]]:
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": str(error.get("msg", "")),
            "type": str(error.get("type", "")),
        }
        for error in errors
    ]


def classify_validation_errors(errors: Sequence[Any]) -> tuple[str, str]:
    """Pick the error code and message for a failed request validation."""

    locations = [tuple(error.get("loc", ())) for error in errors]
    if any(loc and loc[0] == "path" for loc in locations):
        return "INVALID_TASK_ID", "Task id must be an integer."
    if any("due_date" in loc for loc in locations):
        return "INVALID_DATE", "due_date must be an RFC 3339 date-time with timezone offset."
    return "INVALID_REQUEST_BODY", "Request body is malformed."


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
        errors = exc.errors()
        error_code, message = classify_validation_errors(errors)
        return JSONResponse(
            status_code=400,
            content=_error_body(
                request=request,
                error_code=error_code,
                message=message,
                details=_validation_details(errors),
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(
                request=request,
                error_code="HTTP_ERROR",
                message=str(exc.detail),
            ),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, _: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content=_error_body(
                request=request,
                error_code="INTERNAL_SERVER_ERROR",
                message=INTERNAL_ERROR_MESSAGE,
            ),
        )
