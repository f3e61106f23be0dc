"""Error Handlers: global exception handlers producing the response envelope.

Invariants:
    - DatabaseError → 500 envelope carrying the fault message
    - RequestValidationError → 400 envelope listing every violated constraint
    - Exception (catch-all) → 500 envelope, never leaks internal details

Design Decisions:
    - Three-layer handler: infrastructure (DatabaseError), validation (Pydantic), catch-all
    - Extracted from main.py to keep the entry point small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import DatabaseError, ErrorKind
from app.schemas.envelope import envelope

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_database_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_database_error_handler(app: FastAPI) -> None:

    @app.exception_handler(DatabaseError)
    async def database_error_handler(request: Request, exc: DatabaseError):
        """Faults escaping a request's DB session (e.g. closing it)."""
        logger.error(
            f"DatabaseError: {exc.message}",
            extra={
                "error_code": exc.kind.code,
                "path": request.url.path,
                "operation": exc.operation,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=envelope(
                False, "A database error occurred.", error=exc.message,
            ),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": ErrorKind.VALIDATION.code},
        )
        errors = format_validation_errors(exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=envelope(
                False, "Validation failed.", errors=errors, error="; ".join(errors),
            ),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=envelope(
                False, "An unexpected error occurred.",
                error=ErrorKind.INTERNAL.code,
            ),
        )


def format_validation_errors(exc: RequestValidationError) -> list[str]:
    """One "<field>: <message>" entry per violation; the body/query prefix is dropped."""
    formatted = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"] if part not in ("body", "query")]
        field = ".".join(loc) or "body"
        formatted.append(f"{field}: {e['msg']}")
    return formatted
