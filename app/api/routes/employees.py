"""Employee Routes: the HTTP surface of the request handler.

Invariants:
    - Every route returns the envelope via to_response (status decided by the result)
    - Request bodies validated by Pydantic before reaching the route handler
    - DELETE takes the id as a query parameter (?id={guid})
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_employee_service
from app.api.responses import to_response
from app.core.errors import Success
from app.schemas.employee import (
    EmployeeByName, EmployeeCreate, EmployeeResponse, StoreHealth,
)
from app.schemas.envelope import Envelope
from app.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/employees", tags=["employees"])


@router.get("", response_model=Envelope[list[EmployeeResponse]])
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    """Get all employees."""
    return to_response(await service.list_employees())


@router.post(
    "", response_model=Envelope[EmployeeResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    body: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
):
    """Create a new employee."""
    result = await service.create_employee(body)
    headers = None
    if isinstance(result, Success):
        headers = {"Location": f"{router.prefix}?id={result.data.id}"}
    return to_response(result, headers=headers)


@router.delete("", response_model=Envelope[EmployeeResponse])
async def delete_employee(
    employee_id: str | None = Query(None, alias="id"),
    service: EmployeeService = Depends(get_employee_service),
):
    """Delete an employee by id."""
    return to_response(await service.delete_employee(employee_id))


@router.get("/highest-salary", response_model=Envelope[EmployeeResponse])
async def salary_extreme(
    service: EmployeeService = Depends(get_employee_service),
):
    """Get the employee at the configured end of the salary ordering."""
    return to_response(await service.salary_extreme())


@router.post("/by-name", response_model=Envelope[EmployeeResponse])
async def find_by_name(
    body: EmployeeByName,
    service: EmployeeService = Depends(get_employee_service),
):
    """Get an employee by name (case-insensitive)."""
    return to_response(await service.find_by_name(body.name))


@router.get("/health", response_model=Envelope[StoreHealth])
async def store_health(
    service: EmployeeService = Depends(get_employee_service),
):
    """Report record store connectivity and row count."""
    return to_response(await service.health())
