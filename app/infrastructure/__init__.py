"""Infrastructure Layer: database wiring, record store, logging.

Invariants:
    - Infrastructure never decides HTTP status; it raises DatabaseError on faults
"""
