"""Result Mapping: turns service results into enveloped JSON responses.

Invariants:
    - Success → its own status (200/201) with data
    - Failure → kind.http_status with message, errors and error detail
"""

from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.core.errors import Failure, Result
from app.schemas.envelope import envelope


def _jsonable(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, list):
        return [_jsonable(item) for item in data]
    return data


def failure_response(failure: Failure) -> JSONResponse:
    return JSONResponse(
        status_code=failure.http_status,
        content=envelope(
            False, failure.message,
            errors=failure.errors or None, error=failure.error,
        ),
    )


def to_response(result: Result[Any], headers: dict[str, str] | None = None) -> JSONResponse:
    """Map a service result to the envelope response."""
    if isinstance(result, Failure):
        return failure_response(result)
    return JSONResponse(
        status_code=result.status,
        content=envelope(True, result.message, data=_jsonable(result.data)),
        headers=headers,
    )
