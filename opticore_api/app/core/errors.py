"""
Error taxonomy and HTTP mapping.

Services raise the exceptions defined here; ``register_exception_handlers``
turns them (and the framework's own validation/HTTP errors) into JSON
bodies of the form ``{"error": "<message>"}``.  Every error ends the
current request only; none of them affect the process.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


class OptiCoreError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(OptiCoreError):
    """Missing or malformed request fields."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class AuthenticationError(OptiCoreError):
    """Missing or unknown bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class AuthorizationError(OptiCoreError):
    """Role or ownership mismatch."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(OptiCoreError):
    """Unknown client identifier."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Client not found"


def error_response(status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _describe_validation_errors(errors: Any) -> str:
    """Render pydantic errors as ``field: message`` pairs."""
    parts = []
    for err in errors:
        if err.get("type") == "json_invalid":
            return "Invalid JSON body"
        # The first element of ``loc`` is the source (body, path, query).
        loc = [str(p) for p in err.get("loc", ())[1:]]
        field = ".".join(loc) or str(next(iter(err.get("loc", ())), "request"))
        parts.append(f"{field}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


async def _opticore_error_handler(request: Request, exc: OptiCoreError) -> JSONResponse:
    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return error_response(exc.status_code, exc.message, headers)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_errors(exc.errors()))


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, OptiCoreError.default_message)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the ``{"error": ...}`` handlers to ``app``."""
    app.add_exception_handler(OptiCoreError, _opticore_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
