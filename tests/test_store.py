"""Employee Store: tests for the lock-guarded in-memory mapping.

Tests cover:
    - Identifier assignment (starts at 1, strictly increasing, never reused)
    - Copy semantics (callers cannot mutate stored records)
    - get / delete / update contracts, including NotFound
    - Pagination window, clamping and ascending-ID ordering
    - Concurrent creates and mixed concurrent operations
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from employee_api.app.core.errors import EmployeeNotFoundError, NotFoundError
from employee_api.app.core.store import Employee, EmployeeStore


# --- create -------------------------------------------------------------------

def test_first_employee_gets_id_1(store):
    employee = store.create("Ann", "Eng", 1000)
    assert employee == Employee(id=1, name="Ann", position="Eng", salary=1000)


def test_ids_strictly_increase(store):
    ids = [store.create(f"E{i}", "Eng", 1.0).id for i in range(10)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 10


def test_ids_not_reused_after_delete(store):
    store.create("Ann", "Eng", 1000)
    second = store.create("Bob", "Ops", 900)
    store.delete(second.id)
    third = store.create("Cat", "PM", 1100)
    assert third.id == 3


def test_create_accepts_empty_values(store):
    employee = store.create("", "", 0.0)
    assert employee.name == ""
    assert store.get(employee.id).salary == 0.0


def test_returned_record_is_a_copy(store):
    employee = store.create("Ann", "Eng", 1000)
    employee.name = "Mallory"
    assert store.get(1).name == "Ann"


# --- get ----------------------------------------------------------------------

def test_get_after_create_returns_submitted_fields(store):
    created = store.create("Ann", "Eng", 1000)
    assert store.get(created.id) == created


def test_get_missing_raises_not_found(store):
    with pytest.raises(EmployeeNotFoundError) as excinfo:
        store.get(42)
    assert excinfo.value.employee_id == 42
    assert isinstance(excinfo.value, NotFoundError)


def test_get_returns_independent_copies(store):
    store.create("Ann", "Eng", 1000)
    first = store.get(1)
    first.salary = 0
    assert store.get(1).salary == 1000


# --- delete -------------------------------------------------------------------

def test_delete_then_get_raises_not_found(store):
    store.create("Ann", "Eng", 1000)
    store.delete(1)
    with pytest.raises(EmployeeNotFoundError):
        store.get(1)


def test_delete_missing_raises_not_found(store):
    with pytest.raises(EmployeeNotFoundError):
        store.delete(1)


def test_delete_twice_raises_not_found(store):
    store.create("Ann", "Eng", 1000)
    store.delete(1)
    with pytest.raises(EmployeeNotFoundError):
        store.delete(1)


# --- update -------------------------------------------------------------------

def test_update_overwrites_fields_and_keeps_id(store):
    store.create("Ann", "Eng", 1000)
    updated = store.update(1, "Ann B.", "Lead", 1500)
    assert updated == Employee(id=1, name="Ann B.", position="Lead", salary=1500)
    assert store.get(1) == updated


def test_update_missing_leaves_store_unchanged(populated_store):
    before = populated_store.list(1, 10)
    with pytest.raises(EmployeeNotFoundError):
        populated_store.update(99, "Ghost", "None", 0)
    assert populated_store.list(1, 10) == before
    assert len(populated_store) == 5


def test_update_does_not_touch_other_records(populated_store):
    populated_store.update(3, "Changed", "Lead", 1)
    assert populated_store.get(2).name == "Employee 2"
    assert populated_store.get(4).name == "Employee 4"


# --- list ---------------------------------------------------------------------

def test_list_first_page(populated_store):
    page = populated_store.list(1, 2)
    assert [e.id for e in page] == [1, 2]


def test_list_last_partial_page_is_clamped(populated_store):
    page = populated_store.list(3, 2)
    assert [e.id for e in page] == [5]


def test_list_page_past_end_is_empty(populated_store):
    assert populated_store.list(10, 2) == []


def test_list_window_starting_exactly_at_end_is_empty(populated_store):
    assert populated_store.list(2, 5) == []


def test_list_empty_store(store):
    assert store.list(1, 10) == []


def test_list_orders_by_ascending_id_after_deletes_and_updates(populated_store):
    populated_store.delete(2)
    populated_store.update(1, "Renamed", "Eng", 1)
    populated_store.create("New", "Eng", 1)
    assert [e.id for e in populated_store.list(1, 10)] == [1, 3, 4, 5, 6]


def test_list_returns_copies(populated_store):
    page = populated_store.list(1, 1)
    page[0].name = "Mutated"
    assert populated_store.get(1).name == "Employee 1"


@pytest.mark.parametrize("page,limit", [(0, 2), (1, 0), (-1, 5)])
def test_list_rejects_non_positive_arguments(store, page, limit):
    with pytest.raises(ValueError):
        store.list(page, limit)


def test_count_tracks_records(store):
    assert store.count() == 0
    store.create("Ann", "Eng", 1000)
    store.create("Bob", "Ops", 900)
    store.delete(1)
    assert store.count() == 1
    assert len(store) == 1


# --- concurrency --------------------------------------------------------------

def test_concurrent_creates_yield_gap_free_ids(store):
    n = 200
    with ThreadPoolExecutor(max_workers=16) as pool:
        created = list(pool.map(lambda i: store.create(f"E{i}", "Eng", float(i)), range(n)))

    assert sorted(e.id for e in created) == list(range(1, n + 1))
    assert store.count() == n
    for employee in created:
        assert store.get(employee.id) == employee


def test_concurrent_updates_and_deletes_never_lose_records(store):
    for i in range(100):
        store.create(f"E{i}", "Eng", 0.0)

    def work(employee_id):
        if employee_id % 2:
            store.delete(employee_id)
        else:
            store.update(employee_id, "Updated", "Lead", float(employee_id))

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(work, range(1, 101)))

    remaining = store.list(1, 100)
    assert [e.id for e in remaining] == list(range(2, 101, 2))
    assert all(e.name == "Updated" and e.salary == e.id for e in remaining)
