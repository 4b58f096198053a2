"""
Global exception handlers for the Employee API.

Every error response has the same shape, ``{"message": str}``, with
the matching status code:

* ``ApiError`` subclasses (e.g. unknown employee ID) use their own
  status code and message.
* Starlette ``HTTPException`` covers routing failures.  A wrong HTTP
  method is reported as ``MethodNotAllowedError`` (405, with the
  ``Allow`` header kept); an unknown path keeps its 404.
* ``RequestValidationError`` (malformed JSON, missing or non-integer
  query parameters) becomes 400.
* Anything else becomes 500 without leaking internal details.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_api.app.core.errors import ApiError, MethodNotAllowedError, summarize_validation_errors

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def error_response(message: str, status_code: int, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def _register_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return _api_error_response(request, exc)


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        headers = getattr(exc, "headers", None)
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return _api_error_response(request, MethodNotAllowedError(str(exc.detail), headers=headers))
        return error_response(str(exc.detail), exc.status_code, headers)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return error_response(summarize_validation_errors(exc.errors()), status.HTTP_400_BAD_REQUEST)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
        return error_response("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)


def _api_error_response(request: Request, exc: ApiError) -> JSONResponse:
    logger.warning("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return error_response(exc.message, exc.status_code, exc.headers)
