"""Demo Users API Package: in-memory user API for exercising API-testing tools.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
