"""User Routes: paginated/unpaginated listing, lookup, create, update echo, delete.

Invariants:
    - /api/users/all is registered before /api/users/{user_id}
    - Path ids and pagination values are parsed leniently (parse_numeric);
      a non-numeric id matches nothing (404)
    - PUT never mutates the store: it validates, then echoes a canned response
    - DELETE takes the id from the body, not the path, and removes every match

Design Decisions:
    - Update echo is kept on purpose: API-test suites assert on update
      semantics without needing persistence
    - response_model_exclude_none: seed-style records without a job omit the key
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from demo_api.api.dependencies import get_store, read_json_object
from demo_api.core.clock import utc_now_iso
from demo_api.core.paginate import (
    DEFAULT_PAGE, DEFAULT_PER_PAGE, page_slice, total_pages, validate_page_request,
)
from demo_api.core.parse_numeric import as_json_number, parse_numeric
from demo_api.core.user_store import UserStore
from demo_api.schemas.requests import (
    CreateUserRequest, DeleteUserRequest, UpdateUserRequest,
)
from demo_api.schemas.responses import (
    CreatedUser, SingleUser, Support, UpdatedUser, UserList, UserPage,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])

UNCHANGED: str = "(unchanged)"


@router.get("", response_model=UserPage, response_model_exclude_none=True)
async def list_users(
    page: str | None = None,
    per_page: str | None = None,
    store: UserStore = Depends(get_store),
):
    """List users one page at a time (defaults: page 1, 2 per page)."""
    request = validate_page_request(
        parse_numeric(page) if page is not None else DEFAULT_PAGE,
        parse_numeric(per_page) if per_page is not None else DEFAULT_PER_PAGE,
    )
    users = store.list_all()
    return {
        "page": as_json_number(request.page),
        "per_page": as_json_number(request.per_page),
        "total": len(users),
        "total_pages": total_pages(len(users), request.per_page),
        "data": [u.to_dict() for u in page_slice(users, request)],
        "support": Support(),
    }


@router.get("/all", response_model=UserList, response_model_exclude_none=True)
async def list_all_users(store: UserStore = Depends(get_store)):
    users = store.list_all()
    return {"total": len(users), "data": [u.to_dict() for u in users]}


@router.get(
    "/{user_id}", response_model=SingleUser, response_model_exclude_none=True,
)
async def get_user(user_id: str, store: UserStore = Depends(get_store)):
    user = store.get(parse_numeric(user_id))
    return {"data": user.to_dict(), "support": Support()}


@router.post(
    "", response_model=CreatedUser, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: dict = Depends(read_json_object),
    store: UserStore = Depends(get_store),
):
    """Create a user; the response shape differs from the stored record."""
    payload = CreateUserRequest.from_body(body)
    user = store.create(payload.name, payload.job)
    logger.info(f"Created user {payload.name!r}", extra={"user_id": user.id})
    return CreatedUser(
        id=user.id, name=payload.name, job=payload.job,
        createdAt=utc_now_iso(),
    )


@router.put("/{user_id}", response_model=UpdatedUser)
async def update_user(
    user_id: str,
    body: dict = Depends(read_json_object),
    store: UserStore = Depends(get_store),
):
    """Validate an update and echo it back. The stored record is untouched."""
    store.get(parse_numeric(user_id))
    payload = UpdateUserRequest.from_body(body)
    return UpdatedUser(
        name=payload.name if payload.name is not None else UNCHANGED,
        job=payload.job if payload.job is not None else UNCHANGED,
        updatedAt=utc_now_iso(),
    )


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    body: dict = Depends(read_json_object),
    store: UserStore = Depends(get_store),
):
    payload = DeleteUserRequest.from_body(body)
    removed = store.delete(payload.id)
    logger.info(
        f"Deleted {removed} record(s)", extra={"user_id": payload.id},
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
