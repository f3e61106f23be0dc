"""Error Model: explicit per-operation results plus infrastructure exceptions.

Invariants:
    - Expected outcomes (bad input, duplicates, missing rows) are Failure values, never raised
    - Every Failure has a kind; the kind alone decides the HTTP status
    - DatabaseError is the only exception crossing the store boundary

Design Decisions:
    - Success/Failure dataclasses over exception unwinding: the service returns,
      the route maps (ADR: result types at the handler boundary)
    - Infrastructure faults stay exceptions: SQLAlchemy raises, the store translates,
      the service converts to Failure(INTERNAL)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure taxonomy for the request handler."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]

    @property
    def code(self) -> str:
        return f"{self.value.upper()}_ERROR"


_HTTP_STATUS = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.CONFLICT: 409,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


@dataclass(frozen=True)
class Success(Generic[T]):
    """Operation succeeded; data goes in the envelope payload."""
    message: str
    data: T
    status: int = 200

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Operation failed, tagged with the kind that maps to an HTTP status."""
    kind: ErrorKind
    message: str
    error: str | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return False

    @property
    def http_status(self) -> int:
        return self.kind.http_status


Result = Union[Success[T], Failure]


def validation_failure(message: str, errors: list[str] | None = None) -> Failure:
    return Failure(
        ErrorKind.VALIDATION, message,
        error="; ".join(errors) if errors else message,
        errors=list(errors or [message]),
    )


def conflict_failure(message: str, fields: list[str]) -> Failure:
    return Failure(
        ErrorKind.CONFLICT, message,
        error=f"Duplicate value for: {', '.join(fields)}",
        errors=[f"{f}: already in use" for f in fields],
    )


def not_found_failure(message: str) -> Failure:
    return Failure(ErrorKind.NOT_FOUND, message, error=message)


def internal_failure(message: str, exc: BaseException) -> Failure:
    return Failure(ErrorKind.INTERNAL, message, error=str(exc))


class DatabaseError(Exception):
    """Database operation failed."""

    def __init__(self, message: str, operation: str, debug_info: dict[str, Any] | None = None):
        super().__init__(f"Database {operation} failed: {message}")
        self.message = f"Database {operation} failed: {message}"
        self.operation = operation
        self.debug_info = debug_info or {}

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.INTERNAL
