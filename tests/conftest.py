"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- HTTP clients
- Log capture
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from structlog.testing import capture_logs

from task_triage.api.app import app


@pytest.fixture(autouse=True)
def captured_logs():
    """
    Route structlog output into memory for the duration of each test.

    Yields:
        List of captured log event dicts
    """
    with capture_logs() as logs:
        yield logs


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """
    Create async HTTP client for testing FastAPI endpoints.

    Yields:
        AsyncClient instance
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def client() -> TestClient:
    """Create synchronous test client for FastAPI app."""
    return TestClient(app)

