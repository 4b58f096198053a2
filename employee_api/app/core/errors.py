"""
Error hierarchy for the Employee API.

Every error raised on purpose by the application derives from
``ApiError`` and carries the HTTP status code it maps to.  The
exception handlers registered in ``api.error_handlers`` turn these
into ``{"message": ...}`` JSON bodies, so services and the store can
raise without knowing anything about HTTP responses.
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from fastapi import status


class ApiError(Exception):
    """Base class for errors that are reported to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, headers: Optional[Dict[str, str]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.headers = headers


class BadRequestError(ApiError):
    """Malformed request body or query parameters."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    """The requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class MethodNotAllowedError(ApiError):
    """The route exists but does not accept the HTTP verb used.

    ``headers`` should carry the ``Allow`` header listing the accepted
    methods.
    """

    status_code = status.HTTP_405_METHOD_NOT_ALLOWED


class EmployeeNotFoundError(NotFoundError):
    """Raised by the employee store when an identifier is absent."""

    def __init__(self, employee_id: int) -> None:
        super().__init__("employee not found")
        self.employee_id = employee_id


def summarize_validation_errors(errors: Iterable[Mapping[str, Any]], prefix: str = "") -> str:
    """Join pydantic error dicts into one line, e.g. ``query.page: Field required``.

    ``prefix`` is prepended to every location, so body errors read
    ``body.salary: ...`` like the ones FastAPI reports itself.
    """
    parts = []
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if prefix:
            loc = (prefix,) + loc
        location = ".".join(str(part) for part in loc)
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Invalid request"
