"""Tests for GET /status and the root endpoint."""

from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from src.config import settings
from src.main import app


@pytest.fixture
async def client():
    """Create async HTTP client for the app."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client


@pytest.mark.asyncio
async def test_status_endpoint_returns_200(client: AsyncClient) -> None:
    """Test that status endpoint returns 200 OK with JSON."""
    response = await client.get("/status")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"


@pytest.mark.asyncio
async def test_status_endpoint_has_required_fields(client: AsyncClient) -> None:
    """Test the fields of the status body."""
    response = await client.get("/status")

    data: dict[str, Any] = response.json()
    assert data["status"] == "ok"
    assert data["version"] == settings.api_version
    assert isinstance(data["uptime_seconds"], int)
    assert data["uptime_seconds"] >= 0
    assert data["table"] == settings.dynamodb_table_name
    assert data["pending_exports"] == 0


@pytest.mark.asyncio
async def test_status_echoes_request_id(client: AsyncClient) -> None:
    """Test that the logging middleware returns the correlation id."""
    response = await client.get("/status", headers={"X-Request-ID": "abc-123"})

    assert response.headers["x-request-id"] == "abc-123"


@pytest.mark.asyncio
async def test_root_endpoint(client: AsyncClient) -> None:
    """Test the API information endpoint."""
    response = await client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["health"] == "/status"
    assert data["version"] == settings.api_version
