"""Pydantic Schemas: request shapes and response contracts for API endpoints.

Invariants:
    - Every request body is converted to a typed shape before business logic runs
    - Response models mirror the exact JSON shapes API-test suites assert on
"""
