"""Root conftest — shared test configuration."""

import os

# Keep test logs readable and independent of a developer's .env
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "INFO")
