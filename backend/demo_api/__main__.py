"""Process entry point: `python -m demo_api` or the `demo-api` script."""

import uvicorn

from demo_api.config import get_settings
from demo_api.infrastructure.observability import setup_logging


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    uvicorn.run(
        "demo_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
