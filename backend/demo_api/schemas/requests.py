"""Request Shapes: one pydantic model per body-carrying operation.

Invariants:
    - from_body() is the only constructor routes use; it raises
      FieldValidationError with the field-specific message, never pydantic's
    - The first failing field in declaration order is the one reported
    - Strings count as "at least 2 chars" after trimming whitespace
    - CreateUserRequest stores trimmed values; UpdateUserRequest keeps them as sent

Design Decisions:
    - FIELD_ERRORS table per model over pydantic's default messages: the
      error strings are part of the public contract
    - Explicit null counts as "provided" on update (rejected like any non-string)
"""

from typing import Any, ClassVar

from pydantic import BaseModel, Field, StrictStr, ValidationError, field_validator

from demo_api.core.errors import FieldValidationError


MIN_TEXT_LENGTH: int = 2


def _require_min_length(value: str) -> str:
    if len(value.strip()) < MIN_TEXT_LENGTH:
        raise ValueError(f"must be at least {MIN_TEXT_LENGTH} chars after trimming")
    return value


def _is_blank(value: Any) -> bool:
    """Absent, null, empty string, false, 0 or NaN."""
    if value is None or value is False or value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or value != value
    return False


class RequestShape(BaseModel):
    """Base for request bodies: maps pydantic failures to API messages."""

    FIELD_ERRORS: ClassVar[dict[str, str]] = {}

    @classmethod
    def from_body(cls, body: dict):
        try:
            return cls.model_validate(body)
        except ValidationError as exc:
            field = str(exc.errors()[0]["loc"][0])
            raise FieldValidationError(cls.FIELD_ERRORS[field], field=field) from exc


class CreateUserRequest(RequestShape):
    """POST /api/users body."""
    FIELD_ERRORS: ClassVar[dict[str, str]] = {
        "name": 'Field "name" must be a string (min 2 chars)',
        "job": 'Field "job" must be a string (min 2 chars)',
    }

    name: StrictStr
    job: StrictStr

    @field_validator("name", "job")
    @classmethod
    def trim(cls, v: str) -> str:
        return _require_min_length(v).strip()


class UpdateUserRequest(RequestShape):
    """PUT /api/users/{id} body. Absent fields stay None."""
    FIELD_ERRORS: ClassVar[dict[str, str]] = {
        "name": 'If provided, "name" must be a string (min 2 chars)',
        "job": 'If provided, "job" must be a string (min 2 chars)',
    }

    name: StrictStr | None = None
    job: StrictStr | None = None

    # Defaults are not validated, so None here means an explicit null.
    @field_validator("name", "job")
    @classmethod
    def check_if_provided(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("null is not a string")
        return _require_min_length(v)


class DeleteUserRequest(RequestShape):
    """DELETE /api/users body."""
    FIELD_ERRORS: ClassVar[dict[str, str]] = {
        "id": 'Field "id" must be an integer',
    }

    id: int

    @field_validator("id", mode="before")
    @classmethod
    def require_integer(cls, v: Any) -> int:
        """JSON numbers without a fractional part; no bools, no strings."""
        if isinstance(v, bool):
            raise ValueError("booleans are not integers")
        if isinstance(v, int):
            return v
        if isinstance(v, float) and v.is_integer():
            return int(v)
        raise ValueError("not an integer")


class LoginRequest(RequestShape):
    """POST /api/login body. Any non-blank value counts as present."""
    FIELD_ERRORS: ClassVar[dict[str, str]] = {
        "email": "Missing email",
        "password": "Missing password",
    }

    email: Any = Field(None, validate_default=True)
    password: Any = Field(None, validate_default=True)

    @field_validator("email", "password")
    @classmethod
    def require_present(cls, v: Any) -> Any:
        if _is_blank(v):
            raise ValueError("missing")
        return v
