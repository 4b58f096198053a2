"""Employee API client.

A thin wrapper around the Employee API's HTTP routes built on the
``requests`` library.  It exposes one method per operation:

* :meth:`EmployeeAPI.create_employee`: create a record and get its ID.
* :meth:`EmployeeAPI.get_employee`: fetch a single employee.
* :meth:`EmployeeAPI.update_employee`: overwrite name, position and salary.
* :meth:`EmployeeAPI.delete_employee`: remove an employee.
* :meth:`EmployeeAPI.list_employees`: fetch one page of employees.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for
listing) and ``error`` is a dictionary with ``status_code`` and
``message`` keys.  HTTP and network failures never raise, so callers
such as scripts and bots can report errors without try/except blocks.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class EmployeeAPI:
    """Client for interacting with the Employee API."""

    # Route paths exposed by the server.
    CREATE_PATH = "/createemployee"
    GET_PATH = "/getEmployeeById"
    DELETE_PATH = "/deleteEmployee"
    UPDATE_PATH = "/updateemployee"
    LIST_PATH = "/listEmployee"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``.  On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("message", "")
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def create_employee(
        self, name: str, position: str, salary: float
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create an employee; the returned record carries the new ``id``."""
        payload = {"name": name, "position": position, "salary": salary}
        return self._request("POST", self.CREATE_PATH, json_body=payload)

    def get_employee(self, employee_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", self.GET_PATH, params={"id": employee_id})

    def update_employee(
        self, employee_id: int, name: str, position: str, salary: float
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Overwrite name, position and salary of an existing employee."""
        payload = {"id": employee_id, "name": name, "position": position, "salary": salary}
        return self._request("POST", self.UPDATE_PATH, json_body=payload)

    def delete_employee(self, employee_id: int) -> Tuple[bool, Optional[ApiError]]:
        """Delete an employee.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", self.DELETE_PATH, params={"id": employee_id})
        if error:
            return False, error
        return True, None

    def list_employees(self, page: int = 1, limit: int = 20) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve one page of employees ordered by ID.

        Returns:
            A tuple ``(employees, error)``.  ``employees`` is empty on
            failure.
        """
        data, error = self._request("GET", self.LIST_PATH, params={"page": page, "limit": limit})
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None
