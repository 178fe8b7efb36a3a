"""API Layer: FastAPI routes, request plumbing and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error bodies are flat JSON with an "error" field

Design Decisions:
    - Thin routes: parse into a request shape, call the store, shape the response
"""
