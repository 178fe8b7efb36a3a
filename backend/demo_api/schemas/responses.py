"""Response Contracts: the JSON shapes each endpoint returns.

Invariants:
    - CreatedUser is NOT a User: {id, name, job, createdAt} by contract
    - camelCase createdAt/updatedAt and snake_case per_page/total_pages are
      both part of the public shape; do not normalise
"""

from pydantic import BaseModel


SUPPORT_URL: str = "https://example.com/support"
SUPPORT_TEXT: str = "Demo API for testing tooling"


class Support(BaseModel):
    url: str = SUPPORT_URL
    text: str = SUPPORT_TEXT


class User(BaseModel):
    id: int
    email: str
    first_name: str
    last_name: str
    job: str | None = None


class UserPage(BaseModel):
    """GET /api/users."""
    page: int | float
    per_page: int | float
    total: int
    total_pages: int
    data: list[User]
    support: Support


class UserList(BaseModel):
    """GET /api/users/all."""
    total: int
    data: list[User]


class SingleUser(BaseModel):
    """GET /api/users/{id}."""
    data: User
    support: Support


class CreatedUser(BaseModel):
    id: int
    name: str
    job: str
    createdAt: str


class UpdatedUser(BaseModel):
    name: str
    job: str
    updatedAt: str


class LoginToken(BaseModel):
    token: str
