"""Simulated Login: fixed demo credentials exchanged for a fixed token."""

from fastapi import APIRouter, Depends

from demo_api.api.dependencies import read_json_object
from demo_api.core.check_credentials import issue_token
from demo_api.schemas.requests import LoginRequest
from demo_api.schemas.responses import LoginToken

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=LoginToken)
async def login(body: dict = Depends(read_json_object)):
    """400 on a missing field, 401 on a wrong pair, 200 + token otherwise."""
    credentials = LoginRequest.from_body(body)
    return LoginToken(token=issue_token(credentials.email, credentials.password))
