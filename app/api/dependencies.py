"""Request Dependencies: wires the record store into the employee service.

Design Decisions:
    - get_employee_store is the single override point for tests (in-memory store)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.core.domain_types import SalaryExtreme
from app.core.repository_protocols import EmployeeStore
from app.infrastructure.database import get_db
from app.infrastructure.employee_store import SqlAlchemyEmployeeStore
from app.services.employee_service import EmployeeService


def get_employee_store(db: AsyncSession = Depends(get_db)) -> EmployeeStore:
    return SqlAlchemyEmployeeStore(db)


def get_employee_service(
    store: EmployeeStore = Depends(get_employee_store),
    settings: Settings = Depends(get_settings),
) -> EmployeeService:
    return EmployeeService(store, SalaryExtreme(settings.salary_extreme))
