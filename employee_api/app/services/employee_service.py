"""
Service layer for employees.

``EmployeeService`` translates between the API schemas and the
in-memory ``EmployeeStore``.  It holds no state of its own: the store
passed to the constructor is the single source of truth, which lets
each application (and each test) work against its own isolated store.

Lookups of unknown identifiers raise ``EmployeeNotFoundError``; the
API layer's exception handlers turn that into a 404 response.
"""

from __future__ import annotations

import logging
from typing import List

from employee_api.app.core.store import EmployeeStore
from employee_api.app.schemas.employee import EmployeeCreate, EmployeeRead, EmployeeUpdate


logger = logging.getLogger(__name__)


class EmployeeService:
    """Service class for managing employees."""

    def __init__(self, store: EmployeeStore) -> None:
        self.store = store

    def create_employee(self, data: EmployeeCreate) -> EmployeeRead:
        """Store a new employee and return it with its assigned ID."""
        employee = self.store.create(data.name, data.position, data.salary)
        logger.info("Created employee %s", employee.id)
        return EmployeeRead.model_validate(employee)

    def get_employee(self, employee_id: int) -> EmployeeRead:
        return EmployeeRead.model_validate(self.store.get(employee_id))

    def delete_employee(self, employee_id: int) -> None:
        self.store.delete(employee_id)
        logger.info("Deleted employee %s", employee_id)

    def update_employee(self, data: EmployeeUpdate) -> EmployeeRead:
        """Overwrite name, position and salary of the employee ``data.id``."""
        employee = self.store.update(data.id, data.name, data.position, data.salary)
        logger.info("Updated employee %s", employee.id)
        return EmployeeRead.model_validate(employee)

    def list_employees(self, page: int, limit: int) -> List[EmployeeRead]:
        """Return one page of employees, ordered by ascending ID."""
        return [EmployeeRead.model_validate(employee) for employee in self.store.list(page, limit)]
