"""
Tests for application-level behavior: health, metrics, request ids and
error shaping.
"""

import pytest
from fastapi import APIRouter
from httpx import ASGITransport, AsyncClient

from tripbook.api.dependencies import get_session_store, get_storage
from tripbook.main import app


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_metrics_exposed(client: AsyncClient, traveler_client: AsyncClient, host, booking_payload):
    await traveler_client.post("/api/bookings", json=booking_payload(host.id))
    response = await client.get("/metrics")
    assert response.status_code == 200
    assert "bookings_created_total" in response.text
    assert "store_operations_total" in response.text


@pytest.mark.asyncio
async def test_request_id_echoed(client: AsyncClient):
    response = await client.get("/api/destinations", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"
    assert response.headers["X-Response-Time"].endswith("ms")


@pytest.mark.asyncio
async def test_malformed_json_is_bad_request(traveler_client: AsyncClient):
    response = await traveler_client.post(
        "/api/bookings",
        content="not json at all",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_unhandled_error_returns_500(storage, sessions):
    router = APIRouter()

    @router.get("/api/_boom")
    async def boom():
        raise RuntimeError("kaboom")

    app.include_router(router)
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_session_store] = lambda: sessions
    try:
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            response = await ac.get("/api/_boom")
    finally:
        app.router.routes[:] = [r for r in app.router.routes if getattr(r, "path", None) != "/api/_boom"]
        app.dependency_overrides.clear()

    assert response.status_code == 500
    body = response.json()
    assert body["detail"] == "Internal server error"
    assert body["message"] == "kaboom"
    assert "RuntimeError" in body["stack"]
