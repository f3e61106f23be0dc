"""API Info: root redirect to the interactive docs and a discovery endpoint."""

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from app.config import get_settings

router = APIRouter(tags=["info"])

ENDPOINTS = [
    "GET /api/employees - Get all employees",
    "POST /api/employees - Create a new employee",
    "GET /api/employees/highest-salary - Get employee at the salary extreme",
    "POST /api/employees/by-name - Get employee by name",
    "DELETE /api/employees?id={guid} - Delete an employee",
    "GET /api/employees/health - Database connectivity and employee count",
]


@router.get("/", include_in_schema=False)
async def root():
    return RedirectResponse("/docs")


@router.get("/api")
async def api_info():
    settings = get_settings()
    return {
        "message": f"Welcome to {settings.app_name}!",
        "description": "API for managing employees. Use /docs to try the endpoints.",
        "version": settings.app_version,
        "salary_extreme": settings.salary_extreme,
        "endpoints": ENDPOINTS,
        "docs_url": "/docs",
    }
