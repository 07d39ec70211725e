"""Mapping of exceptions to HTTP responses.

Every error body carries ``success: false`` and an ``error`` message.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from salonbook.config import Settings
from salonbook.database.errors import StoreError
from salonbook.domain.errors import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"


def error_response(status_code: int, error: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"success": False, "error": error, **extra}),
    )


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Install the exception handlers on an application.

    Args:
        app: FastAPI application
        settings: Settings; the development environment adds exception
            messages to 500 responses
    """

    @app.exception_handler(ValidationError)
    @app.exception_handler(ConflictError)
    async def handle_bad_request(request: Request, exc: Exception) -> JSONResponse:
        return error_response(400, str(exc))

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return error_response(404, str(exc))

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
        if exc.is_constraint_violation:
            return error_response(400, f"Request rejected by a database constraint ({exc.code})")
        logger.error(
            "%s %s failed [%s]: %s | query=%s",
            request.method,
            request.url.path,
            exc.code,
            exc,
            exc.statement,
        )
        if settings.is_development:
            return error_response(500, INTERNAL_ERROR, message=str(exc))
        return error_response(500, INTERNAL_ERROR)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        return error_response(400, "Invalid request", details=exc.errors())

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            return error_response(
                404, "Endpoint not found", path=request.url.path, method=request.method
            )
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        if settings.is_development:
            return error_response(500, INTERNAL_ERROR, message=str(exc))
        return error_response(500, INTERNAL_ERROR)
