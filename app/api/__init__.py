"""API Layer: FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Employee endpoints always answer with the JSON envelope

Design Decisions:
    - Thin routes delegate to EmployeeService and map its results
"""
