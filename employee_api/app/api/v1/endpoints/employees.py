"""
Employee endpoints for API v1.

These routes expose the CRUD contract of the in-memory employee
store.  Paths keep the names existing clients already call
(``/createemployee``, ``/getEmployeeById`` and so on) rather than a
resource-style layout.  Identifiers and pagination parameters travel
as query parameters; create and update take a JSON body, decoded
as JSON regardless of the ``Content-Type`` header.

Path functions are deliberately synchronous: FastAPI runs them in its
worker thread pool, and the store's lock serialises concurrent calls.
Errors (unknown ID, malformed body or query, wrong HTTP method) are
rendered as ``{"message": ...}`` by the application's exception
handlers.
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from employee_api.app.api.deps import get_employee_create, get_employee_service, get_employee_update
from employee_api.app.schemas.employee import (
    EmployeeCreate,
    EmployeeRead,
    EmployeeUpdate,
    MessageResponse,
)
from employee_api.app.services.employee_service import EmployeeService

router = APIRouter()


def _json_body_docs(schema) -> dict:
    # Bodies are parsed by a dependency, so describe them for OpenAPI by hand.
    return {"requestBody": {"required": True, "content": {"application/json": {"schema": schema.model_json_schema()}}}}


@router.post("/createemployee", response_model=EmployeeRead, openapi_extra=_json_body_docs(EmployeeCreate))
def create_employee(
    employee_in: EmployeeCreate = Depends(get_employee_create),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Create a new employee; the ID is assigned by the server."""
    return service.create_employee(employee_in)


@router.get("/getEmployeeById", response_model=EmployeeRead)
def get_employee(
    employee_id: int = Query(..., alias="id"),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Retrieve a single employee by ID.

    Returns HTTP 404 if the employee is not found.
    """
    return service.get_employee(employee_id)


@router.delete("/deleteEmployee", response_model=MessageResponse)
def delete_employee(
    employee_id: int = Query(..., alias="id"),
    service: EmployeeService = Depends(get_employee_service),
) -> MessageResponse:
    """Delete an employee by ID."""
    service.delete_employee(employee_id)
    return MessageResponse(message="employee deleted successfully")


@router.post("/updateemployee", response_model=EmployeeRead, openapi_extra=_json_body_docs(EmployeeUpdate))
def update_employee(
    employee_in: EmployeeUpdate = Depends(get_employee_update),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Overwrite name, position and salary of an existing employee.

    The body must include the ``id`` of the employee to update.
    Returns HTTP 404 if no such employee exists.
    """
    return service.update_employee(employee_in)


@router.get("/listEmployee", response_model=List[EmployeeRead])
def list_employees(
    page: int = Query(..., ge=1),
    limit: int = Query(..., ge=1),
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeRead]:
    """Return a page of employees ordered by ascending ID.

    Pages past the end of the list are empty.
    """
    return service.list_employees(page, limit)
