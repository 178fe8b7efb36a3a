"""Error Hierarchy: typed exceptions for every failure the API reports.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity and http_status
    - to_response() yields the flat envelope {"error": message, **extra}
    - 400/401/404 are client errors; 500 is simulated or internal

Design Decisions:
    - Single hierarchy with DemoApiError base: one FastAPI handler catches all
    - Flat envelope instead of nested {"error": {...}}: existing API-test suites
      assert on body["error"] being the message string
"""

from typing import Any

from demo_api.core.domain_types import ErrorCategory, ErrorSeverity


class DemoApiError(Exception):
    """Base exception for all Demo API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        http_status: int = 400,
        extra: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.extra = extra or {}

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message, **self.extra}


# ─── Client Errors (400-level) ──────────────────────────────────

class FieldValidationError(DemoApiError):
    """Client supplied a missing or malformed field."""
    def __init__(self, message: str, field: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class UserNotFoundError(DemoApiError):
    """Referenced user id is absent from the store."""
    def __init__(self, user_id: object):
        super().__init__(
            "User not found", "USER_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, 404,
        )
        self.user_id = user_id


class InvalidCredentialsError(DemoApiError):
    """Both credentials present but not the demo pair."""
    def __init__(self):
        super().__init__(
            "Invalid credentials", "INVALID_CREDENTIALS",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, 401,
        )


# ─── Server Errors (500-level) ──────────────────────────────────

class SimulatedFailureError(DemoApiError):
    """500 requested on purpose through the health-check flag."""
    def __init__(self, time: str):
        super().__init__(
            "Internal error (simulated)", "SIMULATED_FAILURE",
            ErrorCategory.SIMULATED, ErrorSeverity.ERROR, 500,
            extra={"time": time},
        )


class MalformedBodyError(DemoApiError):
    """Request body claimed JSON but could not be decoded."""
    def __init__(self, detail: str):
        super().__init__(
            "Internal error", "MALFORMED_BODY", ErrorCategory.INTERNAL,
            ErrorSeverity.ERROR, 500, extra={"detail": detail},
        )
