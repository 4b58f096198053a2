"""
In-memory employee store.

The store owns every employee record together with the counter used
to hand out identifiers.  All five operations (create, get, delete,
update and list) run under a single ``threading.Lock`` for their whole
duration, so concurrent request handlers can never observe or leave a
half-updated mapping.  Identifiers start at 1, strictly increase and
are never reused, even after a record is deleted.

Records never leave the store by reference: every operation returns a
copy, so callers cannot mutate stored data outside the lock.

Nothing is persisted; a new store starts empty.  One store is created
per application in ``main.create_app`` and handed to request handlers
through a dependency rather than living in a module global.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import Dict, List

from .errors import EmployeeNotFoundError


@dataclass
class Employee:
    """A single employee record."""

    id: int
    name: str
    position: str
    salary: float


class EmployeeStore:
    """Thread-safe mapping of identifier to :class:`Employee`."""

    def __init__(self) -> None:
        self._employees: Dict[int, Employee] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, name: str, position: str, salary: float) -> Employee:
        """Store a new employee under the next identifier and return a copy."""
        with self._lock:
            employee = Employee(id=self._next_id, name=name, position=position, salary=salary)
            self._employees[employee.id] = employee
            self._next_id += 1
            return replace(employee)

    def get(self, employee_id: int) -> Employee:
        """Return a copy of the employee or raise ``EmployeeNotFoundError``."""
        with self._lock:
            employee = self._employees.get(employee_id)
            if employee is None:
                raise EmployeeNotFoundError(employee_id)
            return replace(employee)

    def delete(self, employee_id: int) -> None:
        with self._lock:
            if employee_id not in self._employees:
                raise EmployeeNotFoundError(employee_id)
            del self._employees[employee_id]

    def update(self, employee_id: int, name: str, position: str, salary: float) -> Employee:
        """Overwrite name, position and salary of an existing employee.

        The identifier never changes.  Raises ``EmployeeNotFoundError``
        without touching the store if ``employee_id`` is unknown.
        """
        with self._lock:
            employee = self._employees.get(employee_id)
            if employee is None:
                raise EmployeeNotFoundError(employee_id)
            employee.name = name
            employee.position = position
            employee.salary = salary
            return replace(employee)

    def list(self, page: int, limit: int) -> List[Employee]:
        """Return one page of employees ordered by ascending identifier.

        The page covers positions ``[(page - 1) * limit, page * limit)``.
        A page starting past the last record is empty and a page running
        past the end is truncated.
        """
        if page < 1 or limit < 1:
            raise ValueError("page and limit must be positive integers")
        start = (page - 1) * limit
        end = start + limit
        with self._lock:
            if start >= len(self._employees):
                return []
            ids = sorted(self._employees)[start:end]
            return [replace(self._employees[employee_id]) for employee_id in ids]

    def count(self) -> int:
        with self._lock:
            return len(self._employees)

    def __len__(self) -> int:
        return self.count()
