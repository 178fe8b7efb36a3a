"""Domain Types: names for the primitives that flow through the API.

Invariants:
    - UserId is always an int assigned by UserStore (never client-chosen)
    - Numeric is what lenient query/path parsing yields: float, possibly non-finite

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
"""

from enum import Enum
from typing import NewType


UserId = NewType("UserId", int)
Numeric = NewType("Numeric", float)


class ErrorCategory(str, Enum):
    """High-level error categories for logging and response mapping."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    SIMULATED = "simulated"
    INTERNAL = "internal"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"
