"""SQLAlchemy Employee Store: queries against in-memory SQLite.

Tests cover:
    - insert/find_by_id round trip, delete returns snapshot then None
    - Case-insensitive name and email lookups
    - Non-ASCII names match case-insensitively (casefolded key columns)
    - Timestamps come back timezone-aware UTC from a fresh session
    - Salary ordering in both directions with limit
    - count/ping
    - SQLAlchemy faults surface as DatabaseError
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from app.core.domain_types import SalaryOrder
from app.core.errors import DatabaseError
from app.infrastructure.employee_store import SqlAlchemyEmployeeStore
from tests.services.fake_store import make_employee


@pytest.fixture
def store(test_db):
    return SqlAlchemyEmployeeStore(test_db)


async def _seed(store, salaries):
    base = datetime(2026, 1, 1, tzinfo=timezone.utc)
    rows = []
    for i, salary in enumerate(salaries):
        rows.append(await store.insert(make_employee(
            f"Employee {i}", email=f"e{i}@example.com", salary=salary,
            created_at=base + timedelta(minutes=i),
        )))
    return rows


async def test_insert_then_find_by_id(store):
    employee = await store.insert(make_employee("Ada Lovelace", phone="555-0100"))

    found = await store.find_by_id(employee.id)

    assert found is not None
    assert found.name == "Ada Lovelace"
    assert found.phone == "555-0100"
    assert found.salary == Decimal("1000.00")


async def test_find_by_id_unknown(store):
    assert await store.find_by_id(uuid4()) is None


async def test_delete_returns_snapshot_then_none(store):
    employee = await store.insert(make_employee("Ada Lovelace"))

    deleted = await store.delete(employee.id)

    assert deleted is not None
    assert deleted.name == "Ada Lovelace"
    assert await store.delete(employee.id) is None
    assert await store.count() == 0


async def test_find_by_name_case_insensitive(store):
    await store.insert(make_employee("Ada Lovelace"))
    found = await store.find_by_name("ADA LOVELACE")
    assert found is not None
    assert found.name == "Ada Lovelace"


async def test_find_by_name_non_ascii_case(store):
    await store.insert(make_employee("ÉMILE ZOLA", email="emile@example.com"))

    assert (await store.find_by_name("ÉMILE ZOLA")).name == "ÉMILE ZOLA"
    assert (await store.find_by_name("émile zola")).name == "ÉMILE ZOLA"


async def test_find_by_name_casefold_expansion(store):
    await store.insert(make_employee("Hans Strauß", email="hans@example.com"))
    assert await store.find_by_name("HANS STRAUSS") is not None


async def test_timestamps_read_back_as_utc(store, test_session_factory):
    created = datetime(2026, 3, 1, 12, 30, 15, 123456, tzinfo=timezone(timedelta(hours=2)))
    employee = await store.insert(make_employee("Ada Lovelace", created_at=created))

    async with test_session_factory() as other:
        found = await SqlAlchemyEmployeeStore(other).find_by_id(employee.id)

    assert found.created_at.tzinfo is not None
    assert found.created_at.utcoffset() == timedelta(0)
    assert found.created_at == created
    assert found.updated_at == created


async def test_find_by_name_requires_exact_match(store):
    await store.insert(make_employee("Ada Lovelace"))
    assert await store.find_by_name("Ada") is None


async def test_find_by_email_case_insensitive(store):
    await store.insert(make_employee("Ada Lovelace", email="ada@example.com"))
    assert await store.find_by_email("Ada@Example.com") is not None


async def test_all_returns_every_row(store):
    await _seed(store, [1, 2, 3])
    assert len(await store.all()) == 3


async def test_order_by_salary_ascending(store):
    await _seed(store, [10, 20, 5])
    rows = await store.order_by_salary(SalaryOrder.ASCENDING)
    assert [r.salary for r in rows] == [Decimal("5"), Decimal("10"), Decimal("20")]


async def test_order_by_salary_descending_with_limit(store):
    await _seed(store, [10, 20, 5])
    rows = await store.order_by_salary(SalaryOrder.DESCENDING, limit=1)
    assert len(rows) == 1
    assert rows[0].salary == Decimal("20")


async def test_order_by_salary_tie_broken_by_created_at(store):
    await _seed(store, [7, 7])
    rows = await store.order_by_salary(SalaryOrder.ASCENDING, limit=1)
    assert rows[0].name == "Employee 0"


async def test_count_and_ping(store):
    await _seed(store, [1, 2])
    assert await store.count() == 2
    assert await store.ping() is True


async def test_sqlalchemy_fault_becomes_database_error(store, test_db, monkeypatch):
    async def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    monkeypatch.setattr(test_db, "execute", broken_execute)

    with pytest.raises(DatabaseError) as exc_info:
        await store.count()
    assert exc_info.value.operation == "count"
    assert "database is locked" in exc_info.value.message
