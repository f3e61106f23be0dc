"""Services Layer: request handling logic between routes and the record store.

Invariants:
    - Services return Success/Failure values; routes only map them to HTTP
    - Services depend on the EmployeeStore protocol, never on SQLAlchemy
"""
