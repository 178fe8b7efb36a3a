"""API test fixtures: fresh app (and so a fresh seeded store) per test.

Invariants:
    - Every test gets its own UserStore via create_app()
    - The store is exposed so tests can assert on state after a request
"""

import pytest
from httpx import ASGITransport, AsyncClient

from demo_api.core.user_store import UserStore
from demo_api.main import create_app


@pytest.fixture
def store():
    return UserStore.seeded()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
