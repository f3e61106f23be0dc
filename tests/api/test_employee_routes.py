"""Employee Routes: HTTP contract and envelope shape over in-memory SQLite.

Tests cover:
    - Status codes per operation (200/201/400/404/409/500)
    - Envelope keys: success/message always, data on success, errors/error on failure
    - Lowest salary by default, highest when configured
    - Health endpoint reports connectivity and count
"""

from uuid import uuid4

import pytest

from app.api.dependencies import get_employee_store
from app.config import Settings, get_settings
from app.core.errors import DatabaseError
from app.main import app
from tests.services.fake_store import UnreachableEmployeeStore

GRACE = {"name": "Grace Hopper", "email": "grace@example.com", "salary": 1000}


async def _create(client, name, email, salary=1000):
    res = await client.post(
        "/api/employees", json={"name": name, "email": email, "salary": salary},
    )
    assert res.status_code == 201, res.text
    return res.json()["data"]


# ─── Create ──────────────────────────────────────────────────────

async def test_create_returns_201_with_envelope(client):
    res = await client.post("/api/employees", json=GRACE)

    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    assert body["message"] == "Employee created successfully."
    assert body["data"]["name"] == "Grace Hopper"
    assert body["data"]["email"] == "grace@example.com"
    assert body["data"]["salary"] == 1000
    assert body["data"]["phone"] is None
    assert "errors" not in body
    assert res.headers["location"] == f"/api/employees?id={body['data']['id']}"


async def test_repeating_create_returns_409(client):
    await client.post("/api/employees", json=GRACE)

    res = await client.post("/api/employees", json=GRACE)

    assert res.status_code == 409
    body = res.json()
    assert body["success"] is False
    assert "data" not in body
    assert body["errors"] == ["name: already in use", "email: already in use"]


async def test_create_same_name_other_case_returns_409(client):
    await _create(client, "Grace Hopper", "grace@example.com")
    res = await client.post(
        "/api/employees",
        json={"name": "grace hopper", "email": "g2@example.com", "salary": 1},
    )
    assert res.status_code == 409


async def test_create_same_accented_name_other_case_returns_409(client):
    await _create(client, "ÉMILE ZOLA", "emile@example.com")
    res = await client.post(
        "/api/employees",
        json={"name": "émile zola", "email": "ez@example.com", "salary": 1},
    )
    assert res.status_code == 409
    assert res.json()["errors"] == ["name: already in use"]


async def test_created_at_is_the_same_instant_in_create_and_list(client):
    created = await _create(client, "Grace Hopper", "grace@example.com")

    listed = (await client.get("/api/employees")).json()["data"][0]

    assert listed["created_at"] == created["created_at"]
    assert listed["updated_at"] == created["updated_at"]


async def test_create_normalizes_email(client):
    data = await _create(client, "  Alan Turing ", "  Alan@Example.COM ")
    assert data["name"] == "Alan Turing"
    assert data["email"] == "alan@example.com"


async def test_create_invalid_payload_lists_all_violations(client):
    res = await client.post(
        "/api/employees", json={"name": "", "email": "nope", "salary": -5},
    )

    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["message"] == "Validation failed."
    fields = {entry.split(":")[0] for entry in body["errors"]}
    assert fields == {"name", "email", "salary"}


async def test_create_missing_body_is_400(client):
    res = await client.post("/api/employees")
    assert res.status_code == 400
    assert res.json()["success"] is False


# ─── List / Delete ───────────────────────────────────────────────

async def test_list_empty(client):
    res = await client.get("/api/employees")
    assert res.status_code == 200
    assert res.json()["data"] == []


async def test_list_after_creates_and_deletes(client):
    created = [
        await _create(client, f"Employee {i}", f"e{i}@example.com") for i in range(4)
    ]
    await client.delete("/api/employees", params={"id": created[0]["id"]})

    res = await client.get("/api/employees")

    assert len(res.json()["data"]) == 3


async def test_delete_returns_snapshot_then_404(client):
    data = await _create(client, "Grace Hopper", "grace@example.com")

    first = await client.delete("/api/employees", params={"id": data["id"]})
    second = await client.delete("/api/employees", params={"id": data["id"]})

    assert first.status_code == 200
    assert first.json()["data"]["id"] == data["id"]
    assert second.status_code == 404
    assert second.json()["message"] == "Employee not found."


async def test_delete_nil_id_is_400(client):
    res = await client.delete(
        "/api/employees", params={"id": "00000000-0000-0000-0000-000000000000"},
    )
    assert res.status_code == 400


@pytest.mark.parametrize("query", ["", "?id=", "?id=abc"])
async def test_delete_missing_or_malformed_id_is_400(client, query):
    res = await client.delete(f"/api/employees{query}")
    assert res.status_code == 400
    assert res.json()["success"] is False


async def test_delete_unknown_id_is_404(client):
    res = await client.delete("/api/employees", params={"id": str(uuid4())})
    assert res.status_code == 404


# ─── By name ─────────────────────────────────────────────────────

async def test_by_name_case_insensitive(client):
    await _create(client, "Ada Lovelace", "ada@example.com")

    res = await client.post("/api/employees/by-name", json={"name": "ada lovelace"})

    assert res.status_code == 200
    assert res.json()["data"]["name"] == "Ada Lovelace"


@pytest.mark.parametrize("lookup", ["ÉMILE ZOLA", "émile zola", "Émile Zola"])
async def test_by_name_matches_non_ascii_case(client, lookup):
    await _create(client, "ÉMILE ZOLA", "emile@example.com")

    res = await client.post("/api/employees/by-name", json={"name": lookup})

    assert res.status_code == 200
    assert res.json()["data"]["name"] == "ÉMILE ZOLA"


@pytest.mark.parametrize("body", [{"name": "  "}, {"name": ""}, {}])
async def test_by_name_blank_is_400(client, body):
    res = await client.post("/api/employees/by-name", json=body)
    assert res.status_code == 400
    assert res.json()["message"] == "Employee name is required."


async def test_by_name_no_match_is_404(client):
    res = await client.post("/api/employees/by-name", json={"name": "Nobody"})
    assert res.status_code == 404
    assert res.json()["error"] == "Employee with name 'Nobody' not found."


# ─── Salary extreme ──────────────────────────────────────────────

async def test_salary_extreme_empty_is_404(client):
    res = await client.get("/api/employees/highest-salary")
    assert res.status_code == 404
    assert res.json()["message"] == "No employees found."


async def test_salary_extreme_returns_lowest_by_default(client):
    for i, salary in enumerate([10, 20, 5]):
        await _create(client, f"Employee {i}", f"e{i}@example.com", salary)

    res = await client.get("/api/employees/highest-salary")

    assert res.status_code == 200
    assert res.json()["data"]["salary"] == 5


async def test_salary_extreme_highest_when_configured(client):
    app.dependency_overrides[get_settings] = lambda: Settings(salary_extreme="highest")
    for i, salary in enumerate([10, 20, 5]):
        await _create(client, f"Employee {i}", f"e{i}@example.com", salary)

    res = await client.get("/api/employees/highest-salary")

    assert res.json()["data"]["salary"] == 20


# ─── Health / faults ─────────────────────────────────────────────

async def test_health_reports_connectivity_and_count(client):
    await _create(client, "Grace Hopper", "grace@example.com")

    res = await client.get("/api/employees/health")

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["database_connected"] is True
    assert data["employee_count"] == 1


async def test_health_unreachable_store_is_still_200(client):
    app.dependency_overrides[get_employee_store] = UnreachableEmployeeStore

    res = await client.get("/api/employees/health")

    assert res.status_code == 200
    assert res.json()["data"]["database_connected"] is False


async def test_store_fault_maps_to_500_envelope(client):
    app.dependency_overrides[get_employee_store] = UnreachableEmployeeStore

    res = await client.get("/api/employees")

    assert res.status_code == 500
    body = res.json()
    assert body["success"] is False
    assert "connection refused" in body["error"]


async def test_database_error_outside_service_maps_to_500(client):
    def broken_store():
        raise DatabaseError("pool exhausted", "connect")

    app.dependency_overrides[get_employee_store] = broken_store

    res = await client.post("/api/employees/by-name", json={"name": "Ada"})

    assert res.status_code == 500
    assert res.json()["error"] == "Database connect failed: pool exhausted"
