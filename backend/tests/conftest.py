"""Root conftest: shared test configuration."""

import os

# Keep test output readable and independent of the developer's shell
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "WARNING")
