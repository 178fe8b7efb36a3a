"""Request Plumbing: store injection and lenient JSON body reading.

Invariants:
    - get_store returns the store owned by the running app (app.state.store)
    - read_json_object yields a dict: non-JSON content types, empty bodies
      and JSON arrays all become {}
    - Undecodable JSON and bare JSON scalars (5, "x", null, true) raise
      MalformedBodyError (500 with detail)
"""

import json

from fastapi import Request

from demo_api.core.errors import MalformedBodyError
from demo_api.core.user_store import UserStore


def get_store(request: Request) -> UserStore:
    return request.app.state.store


async def read_json_object(request: Request) -> dict:
    """Decode the request body as a JSON object, leniently."""
    content_type = request.headers.get("content-type", "")
    if "json" not in content_type.lower():
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise MalformedBodyError(str(exc)) from exc
    if isinstance(payload, dict):
        return payload
    if isinstance(payload, list):
        return {}
    raise MalformedBodyError(
        f"JSON body must be an object or array, got {type(payload).__name__}",
    )
