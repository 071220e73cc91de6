"""
Domain errors raised by repositories and the auth gate.

Each error carries the HTTP status it maps to; `register_error_handlers`
turns them (and FastAPI/Starlette's own errors) into `{"error": message}`.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal error"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = HTTP_400_BAD_REQUEST
    default_message = "Missing required fields"


class NotFoundError(AppError):
    status_code = HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConflictError(AppError):
    status_code = HTTP_400_BAD_REQUEST
    default_message = "Conflict"


class ForbiddenError(AppError):
    status_code = HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class InvalidCredentials(AppError):
    status_code = HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class InternalError(AppError):
    pass


@contextmanager
def failure_message(message: str):
    """
    Wraps a handler body: domain errors pass through untouched, anything
    else is logged and replaced by an InternalError carrying `message`.
    """
    try:
        yield
    except AppError:
        raise
    except Exception:
        logger.exception(message)
        raise InternalError(message)


# =========================================================
# Handlers
# =========================================================
def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return _error(HTTP_400_BAD_REQUEST, "Invalid request body")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
