"""API test fixtures — fresh app per test + httpx ASGI client.

Invariants:
    - Every test gets its own app (no dependency_overrides bleed between tests)
    - Settings built with _env_file=None: a local .env never changes test behavior
"""

import pytest

from layoff_insights.config import Settings
from layoff_insights.main import create_app
from tests.api.asgi_client import build_client


@pytest.fixture
def test_settings():
    return Settings(_env_file=None)


@pytest.fixture
def test_app(test_settings):
    return create_app(test_settings)


@pytest.fixture
async def client(test_app):
    async with build_client(test_app) as c:
        yield c
    test_app.dependency_overrides.clear()
