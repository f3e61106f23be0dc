"""Employee Store: SQLAlchemy implementation of the EmployeeStore protocol.

Invariants:
    - One AsyncSession per store instance (one per request via get_db)
    - Every mutation commits on its own; no multi-record transactions
    - Name/email lookups compare the casefolded key columns, never SQL lower()
    - SQLAlchemyError never escapes: rolled back, logged, re-raised as DatabaseError

Design Decisions:
    - Ties on salary broken by created_at then id so the extreme query is deterministic
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import asdict
from typing import AsyncIterator, Sequence

from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import EmployeeId, SalaryOrder, match_key
from app.core.errors import DatabaseError
from app.core.repository_protocols import NewEmployee
from app.models.employee import Employee

logger = logging.getLogger(__name__)


class SqlAlchemyEmployeeStore:
    """Record store over the employees table."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @asynccontextmanager
    async def _translate_errors(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            try:
                await self._session.rollback()
            except SQLAlchemyError as rollback_error:
                logger.warning(f"Rollback after failed {operation} also failed: {rollback_error}")
            logger.error(
                f"Employee store {operation} failed: {e}",
                extra={"operation": operation},
            )
            raise DatabaseError(str(e.__cause__ or e), operation) from e

    async def insert(self, new: NewEmployee) -> Employee:
        employee = Employee(**asdict(new))
        async with self._translate_errors("insert"):
            self._session.add(employee)
            await self._session.commit()
        return employee

    async def delete(self, employee_id: EmployeeId) -> Employee | None:
        async with self._translate_errors("delete"):
            employee = await self._session.get(Employee, employee_id)
            if employee is None:
                return None
            await self._session.delete(employee)
            await self._session.commit()
        return employee

    async def find_by_id(self, employee_id: EmployeeId) -> Employee | None:
        async with self._translate_errors("find_by_id"):
            return await self._session.get(Employee, employee_id)

    async def find_by_name(self, name: str) -> Employee | None:
        async with self._translate_errors("find_by_name"):
            result = await self._session.execute(
                select(Employee)
                .where(Employee.name_key == match_key(name))
                .limit(1),
            )
            return result.scalars().first()

    async def find_by_email(self, email: str) -> Employee | None:
        async with self._translate_errors("find_by_email"):
            result = await self._session.execute(
                select(Employee)
                .where(Employee.email_key == match_key(email))
                .limit(1),
            )
            return result.scalars().first()

    async def all(self) -> Sequence[Employee]:
        async with self._translate_errors("list"):
            result = await self._session.execute(
                select(Employee).order_by(Employee.created_at, Employee.id),
            )
            return result.scalars().all()

    async def order_by_salary(
        self, order: SalaryOrder, limit: int | None = None,
    ) -> Sequence[Employee]:
        salary = (
            Employee.salary.asc() if order is SalaryOrder.ASCENDING
            else Employee.salary.desc()
        )
        query = select(Employee).order_by(
            salary, Employee.created_at.asc(), Employee.id.asc(),
        )
        if limit is not None:
            query = query.limit(limit)
        async with self._translate_errors("order_by_salary"):
            result = await self._session.execute(query)
            return result.scalars().all()

    async def count(self) -> int:
        async with self._translate_errors("count"):
            result = await self._session.execute(
                select(func.count()).select_from(Employee),
            )
            return int(result.scalar_one())

    async def ping(self) -> bool:
        async with self._translate_errors("ping"):
            await self._session.execute(text("SELECT 1"))
        return True
