"""Response Envelope: the fixed JSON wrapper every employee endpoint returns.

Invariants:
    - success and message always present
    - data only on success; errors/error only on failure
    - Absent keys are omitted, but nulls inside data are kept
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Documented shape of every response (OpenAPI)."""
    success: bool
    message: str
    data: T | None = None
    errors: list[str] | None = None
    error: str | None = None


def envelope(
    success: bool,
    message: str,
    *,
    data: Any = None,
    errors: list[str] | None = None,
    error: str | None = None,
) -> dict[str, Any]:
    """Build an envelope dict; data must already be JSON-compatible."""
    body: dict[str, Any] = {"success": success, "message": message}
    if data is not None:
        body["data"] = data
    if errors:
        body["errors"] = errors
    if error is not None:
        body["error"] = error
    return body
