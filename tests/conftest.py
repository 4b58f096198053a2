"""Root conftest: a fresh store, app and HTTP client for every test."""

import pytest
from fastapi.testclient import TestClient

from employee_api.app.core.store import EmployeeStore
from employee_api.app.main import create_app


@pytest.fixture
def store():
    return EmployeeStore()


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def populated_store(store):
    """Store holding employees with IDs 1..5."""
    for i in range(1, 6):
        store.create(f"Employee {i}", "Engineer", 1000.0 * i)
    return store
