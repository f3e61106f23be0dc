"""Employee Admin API Package: single-table employee record manager.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
