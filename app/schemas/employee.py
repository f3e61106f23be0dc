"""Employee Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - EmployeeCreate: name/phone trimmed, email trimmed + lowercased + syntax-checked
    - salary >= 0, quantized to 2 fractional digits, fits numeric(18, 2)
    - Blank phone becomes None
    - Every violated constraint is reported (pydantic collects per-field errors)

Design Decisions:
    - email-validator directly (not EmailStr): keeps the 100-char limit on the same field
    - salary serialized as a JSON number, not pydantic's default Decimal string
"""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated
from uuid import UUID

from email_validator import EmailNotValidError, validate_email
from pydantic import (
    BaseModel, ConfigDict, Field, PlainSerializer, field_validator,
)

from app.core.domain_types import (
    EMAIL_MAX_LENGTH, NAME_MAX_LENGTH, PHONE_MAX_LENGTH,
    SALARY_PRECISION, SALARY_SCALE,
)

_CENTS = Decimal(1).scaleb(-SALARY_SCALE)
_SALARY_LIMIT = Decimal(10) ** (SALARY_PRECISION - SALARY_SCALE)

Money = Annotated[
    Decimal,
    PlainSerializer(lambda v: float(v), return_type=float, when_used="json"),
]


class EmployeeCreate(BaseModel):
    """Employee creation payload."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    email: str = Field(min_length=1, max_length=EMAIL_MAX_LENGTH)
    phone: str | None = Field(None, max_length=PHONE_MAX_LENGTH)
    salary: Decimal = Field(ge=0)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"invalid email address: {e}") from e
        return v.lower()

    @field_validator("phone")
    @classmethod
    def blank_phone_is_none(cls, v: str | None) -> str | None:
        return v or None

    @field_validator("salary")
    @classmethod
    def quantize_salary(cls, v: Decimal) -> Decimal:
        if v < _SALARY_LIMIT:
            v = v.quantize(_CENTS, rounding=ROUND_HALF_UP)
        if v >= _SALARY_LIMIT:
            raise ValueError(f"salary must be less than {_SALARY_LIMIT:,}")
        return v


class EmployeeByName(BaseModel):
    """Lookup payload; a missing name is treated as empty and rejected by the service."""
    name: str | None = None


class EmployeeResponse(BaseModel):
    """Employee as returned in the envelope payload."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    phone: str | None = None
    salary: Money
    created_at: datetime
    updated_at: datetime | None = None


class StoreHealth(BaseModel):
    database_connected: bool
    employee_count: int | None = None
    checked_at: datetime
    error: str | None = None
