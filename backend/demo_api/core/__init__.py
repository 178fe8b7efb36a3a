"""Core Layer: store, pagination, parsing and error types. No HTTP, no IO.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Functions are pure except UserStore, which owns the only mutable state

Design Decisions:
    - Functional core separated from the FastAPI shell (routes stay thin)
"""
