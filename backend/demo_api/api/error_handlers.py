"""Error Handlers: global exception handling for the Demo API.

Invariants:
    - DemoApiError -> its own status and flat {"error": ...} envelope
    - Any other exception -> 500 {"error": "Internal error", "detail": str(exc)}
    - Every error response passes back through CORSMiddleware, so it carries
      the same CORS headers as a success

Design Decisions:
    - Two layers: domain (DemoApiError exception handler) and catch-all
      (HTTP middleware). Starlette runs an Exception handler in
      ServerErrorMiddleware, outside CORS; the middleware keeps it inside
    - register_error_handlers must run before CORSMiddleware is added
      (the last middleware added is the outermost)
    - Catch-all exposes str(exc) as detail: this is a test fixture API and
      callers assert on the detail text
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from demo_api.core.errors import DemoApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_demo_api_error_handler(app)
    _register_catch_all_middleware(app)


def _register_demo_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(DemoApiError)
    async def demo_api_error_handler(request: Request, exc: DemoApiError):
        """Handle validation, not-found, auth and simulated errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"DemoApiError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_catch_all_middleware(app: FastAPI) -> None:

    @app.middleware("http")
    async def internal_error_middleware(request: Request, call_next):
        """Catch-all for faults nothing else handled."""
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled exception on {request.url.path}: {exc}",
                exc_info=True,
                extra={"path": request.url.path, "method": request.method},
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Internal error", "detail": str(exc)},
            )
