"""Simulated Login: the one email/password pair that yields a token.

Invariants:
    - Comparison is exact (no case folding, no trimming)
    - Non-matching pairs raise InvalidCredentialsError (401)
"""

from demo_api.core.errors import InvalidCredentialsError


DEMO_EMAIL: str = "eve.holt@reqres.in"
DEMO_PASSWORD: str = "cityslicka"
DEMO_TOKEN: str = "demo-token-123"


def issue_token(email: object, password: object) -> str:
    """Return the demo token for the demo pair; raise otherwise."""
    if email == DEMO_EMAIL and password == DEMO_PASSWORD:
        return DEMO_TOKEN
    raise InvalidCredentialsError()
