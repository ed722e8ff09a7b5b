"""
Snippetbox Backend - Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── static_dir: Temporary /static/ directory holding one stylesheet
    ├── app_settings: Settings pointing at static_dir
    ├── snippet_app: FastAPI app built from app_settings
    └── test_client: HTTPX AsyncClient for API endpoint testing
"""

import os

# Override settings for testing BEFORE any snippetbox imports
os.environ["LISTEN_ADDR"] = "127.0.0.1:4000"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from snippetbox.config import Settings
from snippetbox.main import create_app

STYLESHEET = "body { font-family: sans-serif; }\n"


@pytest.fixture
def static_dir(tmp_path):
    """A fresh static directory containing css/main.css."""
    directory = tmp_path / "static"
    (directory / "css").mkdir(parents=True)
    (directory / "css" / "main.css").write_text(STYLESHEET)
    return directory


@pytest.fixture
def app_settings(static_dir):
    return Settings(static_dir=str(static_dir))


@pytest.fixture
def snippet_app(app_settings):
    return create_app(app_settings)


@pytest_asyncio.fixture
async def test_client(snippet_app):
    """
    Provides an async HTTP test client for endpoint testing.

    Requests go straight to the ASGI app through ASGITransport; no server
    or socket is involved.

    Usage:
        async def test_home(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=snippet_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
