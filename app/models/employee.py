"""Employee ORM: the single persisted entity.

Invariants:
    - id is a UUID primary key generated client-side (uuid4), never reused
    - salary is stored at fixed 2-decimal precision (numeric(18, 2))
    - created_at set once at creation; updated_at stamped at creation (no update operation)
    - name_key/email_key always equal match_key(name)/match_key(email)
    - name/email uniqueness is NOT a table constraint; enforced by a service pre-check

Design Decisions:
    - Generic Uuid type: native uuid on PostgreSQL, CHAR(32) on SQLite
    - Casefolded key columns instead of SQL lower(): SQLite's lower() is ASCII-only,
      so lookups compare keys computed in Python on both engines
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, validates

from app.core.domain_types import (
    EMAIL_MAX_LENGTH, MATCH_KEY_MAX_LENGTH, NAME_MAX_LENGTH, PHONE_MAX_LENGTH,
    SALARY_PRECISION, SALARY_SCALE, match_key,
)
from app.db.base import Base
from app.db.types import UTCDateTime


class Employee(Base):
    """Employee record."""
    __tablename__ = "employees"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    name_key: Mapped[str] = mapped_column(
        String(MATCH_KEY_MAX_LENGTH), nullable=False, index=True,
    )
    email: Mapped[str] = mapped_column(String(EMAIL_MAX_LENGTH), nullable=False)
    email_key: Mapped[str] = mapped_column(
        String(MATCH_KEY_MAX_LENGTH), nullable=False, index=True,
    )
    phone: Mapped[str | None] = mapped_column(
        String(PHONE_MAX_LENGTH), nullable=True,
    )
    salary: Mapped[Decimal] = mapped_column(
        Numeric(SALARY_PRECISION, SALARY_SCALE, asdecimal=True), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime(), nullable=True,
    )

    @validates("name", "email")
    def _sync_match_key(self, key: str, value: str) -> str:
        setattr(self, f"{key}_key", match_key(value))
        return value

    def __repr__(self) -> str:
        return f"<Employee id={self.id} name={self.name!r}>"
