"""
Request dependencies shared by the v1 endpoints.

The employee store is created once per application and kept on
``app.state``; these helpers hand it (wrapped in a service) to path
functions via ``Depends``.

Create and update bodies are parsed here rather than by FastAPI's
body binding: the body is decoded as JSON whatever ``Content-Type``
the client sent, so ``curl -d '{...}'`` (form-urlencoded) and
``text/plain`` requests work like JSON ones.
"""

from typing import Type, TypeVar

from fastapi import Depends, Request
from pydantic import BaseModel, ValidationError

from employee_api.app.core.errors import BadRequestError, summarize_validation_errors
from employee_api.app.core.store import EmployeeStore
from employee_api.app.schemas.employee import EmployeeCreate, EmployeeUpdate
from employee_api.app.services.employee_service import EmployeeService

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def get_employee_store(request: Request) -> EmployeeStore:
    return request.app.state.employee_store


def get_employee_service(store: EmployeeStore = Depends(get_employee_store)) -> EmployeeService:
    return EmployeeService(store)


async def parse_json_body(request: Request, schema: Type[SchemaT]) -> SchemaT:
    """Validate the raw request body as JSON against ``schema``.

    Raises ``BadRequestError`` for empty, malformed or invalid bodies.
    """
    body = await request.body()
    try:
        return schema.model_validate_json(body)
    except ValidationError as exc:
        raise BadRequestError(summarize_validation_errors(exc.errors(), prefix="body")) from exc


async def get_employee_create(request: Request) -> EmployeeCreate:
    return await parse_json_body(request, EmployeeCreate)


async def get_employee_update(request: Request) -> EmployeeUpdate:
    return await parse_json_body(request, EmployeeUpdate)
