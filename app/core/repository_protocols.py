"""Boundary Protocols: contract between the request handler and the record store.

Invariants:
    - The service NEVER imports a concrete store, only this Protocol
    - Each method is an independent unit of work (no cross-call transactions)
    - Faults surface as DatabaseError (core/errors.py), never as driver exceptions

Design Decisions:
    - Protocol over ABC: structural subtyping, the in-memory test store needs no base class
    - Async in Protocol: implementations do IO
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Protocol, Sequence
from uuid import UUID

from app.core.domain_types import EmployeeId, SalaryOrder


class EmployeeLike(Protocol):
    """Structural contract for employee rows handed back by a store."""
    id: UUID
    name: str
    email: str
    phone: str | None
    salary: object
    created_at: object
    updated_at: object


@dataclass(frozen=True)
class NewEmployee:
    """Fully-formed record handed to insert; the store decides how to persist it."""
    id: UUID
    name: str
    email: str
    phone: str | None
    salary: Decimal
    created_at: datetime
    updated_at: datetime | None


class EmployeeStore(Protocol):
    """Contract for employee persistence, implemented by infrastructure."""
    async def insert(self, new: NewEmployee) -> EmployeeLike: ...
    async def delete(self, employee_id: EmployeeId) -> EmployeeLike | None: ...
    async def find_by_id(self, employee_id: EmployeeId) -> EmployeeLike | None: ...
    async def find_by_name(self, name: str) -> EmployeeLike | None: ...
    async def find_by_email(self, email: str) -> EmployeeLike | None: ...
    async def all(self) -> Sequence[EmployeeLike]: ...
    async def order_by_salary(
        self, order: SalaryOrder, limit: int | None = None,
    ) -> Sequence[EmployeeLike]: ...
    async def count(self) -> int: ...
    async def ping(self) -> bool: ...
