"""Demo Users API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DemoApiError and stray exceptions to flat JSON,
      registered before CORS so error responses carry CORS headers too
    - CORS configured from settings (defaults to any origin)
    - Each app owns exactly one UserStore, created here and reachable only
      through app.state / the get_store dependency

Design Decisions:
    - create_app() factory + module-level app: uvicorn serves `app`, tests
      build a fresh app (and so a fresh seeded store) per test
    - Store built in the factory, not the lifespan: ASGI test transports do
      not run lifespan events
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from demo_api.api.error_handlers import register_error_handlers
from demo_api.api.routes import health, login, users
from demo_api.config import Settings, get_settings
from demo_api.core.user_store import UserStore
from demo_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    store: UserStore | None = None, settings: Settings | None = None,
) -> FastAPI:
    """Build the API with its own store (a fresh seeded one by default)."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        logger.info(f"Demo API listening on http://localhost:{settings.port}")
        yield
        logger.info("Demo API shutting down")

    app = FastAPI(title="Demo Users API", version="1.0.0", lifespan=lifespan)
    app.state.store = store if store is not None else UserStore.seeded()

    register_error_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(login.router)

    return app


app = create_app()
