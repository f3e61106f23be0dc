"""Employee Service: validates input, calls the record store, returns explicit results.

Invariants:
    - Every operation returns Success or Failure; expected outcomes are never raised
    - Store faults (DatabaseError) become Failure(INTERNAL) here, at the handler boundary
    - Delete rejects a missing, blank, malformed or nil id before any lookup
    - Name/email uniqueness is a check-then-insert pre-check (racy under concurrent creates)
    - The extreme-salary policy is fixed at construction

Design Decisions:
    - Store injected at construction: tests pass an in-memory store, the app a SQLAlchemy one
    - Responses built as EmployeeResponse so routes never touch ORM objects
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Sequence

from app.core.domain_types import NIL_EMPLOYEE_ID, EmployeeId, SalaryExtreme
from app.core.errors import (
    DatabaseError, Failure, Result, Success,
    conflict_failure, internal_failure, not_found_failure, validation_failure,
)
from app.core.repository_protocols import EmployeeLike, EmployeeStore, NewEmployee
from app.schemas.employee import EmployeeCreate, EmployeeResponse, StoreHealth

logger = logging.getLogger(__name__)


def parse_employee_id(raw: str | None) -> EmployeeId | Failure:
    """Parse the delete id; the nil UUID counts as empty."""
    raw = (raw or "").strip()
    if not raw:
        return validation_failure("Employee id is required.")
    try:
        employee_id = EmployeeId(uuid.UUID(raw))
    except ValueError:
        return validation_failure(
            "Employee id must be a valid GUID.", [f"id: '{raw}' is not a valid GUID"],
        )
    if employee_id == NIL_EMPLOYEE_ID:
        return validation_failure("Employee id is required.")
    return employee_id


def _to_response(employee: EmployeeLike) -> EmployeeResponse:
    return EmployeeResponse.model_validate(employee)


def _conflict_message(fields: list[str]) -> str:
    return f"An employee with the same {' and '.join(fields)} already exists."


class EmployeeService:
    """Request handler operations over an EmployeeStore."""

    def __init__(
        self,
        store: EmployeeStore,
        salary_extreme: SalaryExtreme = SalaryExtreme.LOWEST,
    ):
        self._store = store
        self._salary_extreme = salary_extreme

    async def list_employees(self) -> Result[list[EmployeeResponse]]:
        try:
            employees: Sequence[EmployeeLike] = await self._store.all()
        except DatabaseError as e:
            return internal_failure("An error occurred while retrieving employees.", e)
        return Success(
            f"Retrieved {len(employees)} employee(s).",
            [_to_response(e) for e in employees],
        )

    async def create_employee(self, payload: EmployeeCreate) -> Result[EmployeeResponse]:
        try:
            duplicates = []
            if await self._store.find_by_name(payload.name) is not None:
                duplicates.append("name")
            if await self._store.find_by_email(payload.email) is not None:
                duplicates.append("email")
            if duplicates:
                logger.warning(
                    f"Rejected duplicate employee: {', '.join(duplicates)}",
                    extra={"error_code": "CONFLICT_ERROR"},
                )
                return conflict_failure(_conflict_message(duplicates), duplicates)

            now = datetime.now(timezone.utc)
            new = NewEmployee(
                id=uuid.uuid4(),
                name=payload.name,
                email=payload.email,
                phone=payload.phone,
                salary=payload.salary,
                created_at=now,
                updated_at=now,
            )
            employee = await self._store.insert(new)
        except DatabaseError as e:
            return internal_failure("An error occurred while creating the employee.", e)

        logger.info("Employee created", extra={"employee_id": employee.id})
        return Success(
            "Employee created successfully.", _to_response(employee), status=201,
        )

    async def delete_employee(self, raw_id: str | None) -> Result[EmployeeResponse]:
        parsed = parse_employee_id(raw_id)
        if isinstance(parsed, Failure):
            return parsed
        try:
            employee = await self._store.delete(parsed)
        except DatabaseError as e:
            return internal_failure("An error occurred while deleting the employee.", e)
        if employee is None:
            logger.warning(
                "Delete of unknown employee", extra={"employee_id": parsed},
            )
            return not_found_failure("Employee not found.")

        logger.info("Employee deleted", extra={"employee_id": parsed})
        return Success("Employee deleted successfully.", _to_response(employee))

    async def find_by_name(self, name: str | None) -> Result[EmployeeResponse]:
        name = (name or "").strip()
        if not name:
            return validation_failure(
                "Employee name is required.", ["name: must not be empty"],
            )
        try:
            employee = await self._store.find_by_name(name)
        except DatabaseError as e:
            return internal_failure("An error occurred while retrieving the employee.", e)
        if employee is None:
            return not_found_failure(f"Employee with name '{name}' not found.")
        return Success("Employee retrieved successfully.", _to_response(employee))

    async def salary_extreme(self) -> Result[EmployeeResponse]:
        extreme = self._salary_extreme.value
        try:
            employees = await self._store.order_by_salary(
                self._salary_extreme.order, limit=1,
            )
        except DatabaseError as e:
            return internal_failure(
                f"An error occurred while retrieving the employee with {extreme} salary.", e,
            )
        if not employees:
            return not_found_failure("No employees found.")
        return Success(
            f"Employee with {extreme} salary retrieved successfully.",
            _to_response(employees[0]),
        )

    async def health(self) -> Result[StoreHealth]:
        checked_at = datetime.now(timezone.utc)
        try:
            connected = await self._store.ping()
            count = await self._store.count()
        except DatabaseError as e:
            logger.warning(f"Employee store unreachable: {e}")
            return Success(
                "Database connection failed.",
                StoreHealth(
                    database_connected=False, checked_at=checked_at, error=str(e),
                ),
            )
        return Success(
            "Database connection successful.",
            StoreHealth(
                database_connected=connected, employee_count=count, checked_at=checked_at,
            ),
        )
