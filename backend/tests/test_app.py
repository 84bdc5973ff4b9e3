"""
Tests for application-level behaviour: health, metrics, error mapping.
"""

import pytest
from httpx import AsyncClient, ASGITransport

from app.api.dependencies import get_booking_service
from app.main import app


class ExplodingService:
    async def get_booking(self, user_id: int):
        raise RuntimeError("database went away")


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "ok"


@pytest.mark.asyncio
async def test_request_id_header(client: AsyncClient):
    generated = await client.get("/health")
    assert generated.headers["X-Request-ID"]

    forwarded = await client.get("/health", headers={"X-Request-ID": "abc123"})
    assert forwarded.headers["X-Request-ID"] == "abc123"


@pytest.mark.asyncio
async def test_metrics_count_booking_outcomes(client: AsyncClient, auth_headers):
    await client.get("/booking", headers=auth_headers)

    response = await client.get("/metrics")
    assert response.status_code == 200
    assert 'booking_attempts_total{operation="get",status="not_found"}' in response.text


@pytest.mark.asyncio
async def test_unexpected_error_returns_500(client: AsyncClient, auth_headers):
    """Errors outside the booking domain still produce a response."""
    app.dependency_overrides[get_booking_service] = lambda: ExplodingService()

    # The server error middleware re-raises after responding; keep it inside the transport
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/booking", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
