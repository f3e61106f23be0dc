"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - EmployeeId wraps a UUID; the nil UUID is never a valid identifier
    - Field limits are declared once here and shared by the ORM model and schemas
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", UUID)

NIL_EMPLOYEE_ID = EmployeeId(UUID(int=0))


# ─── Field Limits ────────────────────────────────────────────────

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 100
PHONE_MAX_LENGTH = 15
SALARY_PRECISION = 18
SALARY_SCALE = 2


# ─── Enums ───────────────────────────────────────────────────────

class SalaryOrder(str, Enum):
    """Sort direction for salary queries."""
    ASCENDING = "ascending"
    DESCENDING = "descending"


class SalaryExtreme(str, Enum):
    """Which end of the salary ordering the extreme-salary query returns."""
    LOWEST = "lowest"
    HIGHEST = "highest"

    @property
    def order(self) -> SalaryOrder:
        if self is SalaryExtreme.LOWEST:
            return SalaryOrder.ASCENDING
        return SalaryOrder.DESCENDING


# ─── Matching ────────────────────────────────────────────────────

MATCH_KEY_MAX_LENGTH = 3 * max(NAME_MAX_LENGTH, EMAIL_MAX_LENGTH)


def match_key(value: str) -> str:
    """Case-insensitive comparison key; casefold() can expand a character (ß -> ss)."""
    return value.casefold()
