"""
Tests for admin dashboard endpoints and the host directory.
"""

import pytest
from httpx import AsyncClient

ADMIN_PATHS = ["/api/admin/users", "/api/admin/bookings", "/api/admin/revenue"]


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ADMIN_PATHS)
async def test_admin_endpoints_require_session(client: AsyncClient, path):
    response = await client.get(path)
    assert response.status_code == 401


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ADMIN_PATHS)
async def test_admin_endpoints_reject_other_roles(traveler_client: AsyncClient, host_client: AsyncClient, path):
    for ac in (traveler_client, host_client):
        response = await ac.get(path)
        assert response.status_code == 403
        assert response.json()["detail"] == "Insufficient permissions"


@pytest.mark.asyncio
async def test_list_users_hides_passwords(admin_client: AsyncClient, admin, host, traveler):
    response = await admin_client.get("/api/admin/users")
    assert response.status_code == 200
    users = response.json()
    assert [u["id"] for u in users] == [admin.id, host.id, traveler.id]
    assert all("password" not in u for u in users)


@pytest.mark.asyncio
async def test_admin_lists_all_bookings(admin_client: AsyncClient, pending_booking):
    response = await admin_client.get("/api/admin/bookings")
    assert response.status_code == 200
    assert [b["id"] for b in response.json()] == [pending_booking["id"]]


@pytest.mark.asyncio
async def test_delete_user(admin_client: AsyncClient, traveler, storage):
    response = await admin_client.delete(f"/api/admin/users/{traveler.id}")
    assert response.status_code == 200
    assert response.json()["message"] == "User deleted successfully"
    assert await storage.users.get_by(email=traveler.email) is None


@pytest.mark.asyncio
async def test_delete_user_keeps_their_bookings(admin_client: AsyncClient, traveler, pending_booking, storage):
    response = await admin_client.delete(f"/api/admin/users/{traveler.id}")
    assert response.status_code == 200
    assert len(await storage.bookings.list(user_id=traveler.id)) == 1


@pytest.mark.asyncio
async def test_delete_missing_user(admin_client: AsyncClient):
    response = await admin_client.delete("/api/admin/users/999")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_host_cannot_delete_users(host_client: AsyncClient, traveler):
    response = await host_client.delete(f"/api/admin/users/{traveler.id}")
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_revenue_report(
    admin_client: AsyncClient, traveler_client: AsyncClient, host_client: AsyncClient,
    host, other_host, booking_payload,
):
    """
    Only confirmed bookings count, grouped by the month of their start date
    and by host.
    """
    # Admin bookings start confirmed
    await admin_client.post("/api/bookings", json=booking_payload(
        host.id, startDate="2024-01-10", price="20000"))
    await admin_client.post("/api/bookings", json=booking_payload(
        other_host.id, startDate="2024-01-20", price="5000.50"))
    await admin_client.post("/api/bookings", json=booking_payload(
        host.id, startDate="2024-02-03", price="10000"))

    # Pending, then confirmed by its host
    confirmed = (await traveler_client.post("/api/bookings", json=booking_payload(
        host.id, startDate="2024-02-14", price="3000"))).json()
    await host_client.patch(f"/api/bookings/{confirmed['id']}/status", json={"status": "confirmed"})

    # Still pending: not counted
    await traveler_client.post("/api/bookings", json=booking_payload(
        host.id, startDate="2024-03-01", price="99999"))

    response = await admin_client.get("/api/admin/revenue")
    assert response.status_code == 200
    report = response.json()
    assert report["totalRevenue"] == pytest.approx(38000.50)
    assert report["monthlyRevenue"] == pytest.approx({"2024-01": 25000.50, "2024-02": 13000.0})
    assert report["revenueByHost"] == pytest.approx({str(host.id): 33000.0, str(other_host.id): 5000.50})


@pytest.mark.asyncio
async def test_revenue_report_empty(admin_client: AsyncClient):
    response = await admin_client.get("/api/admin/revenue")
    assert response.json() == {"totalRevenue": 0.0, "monthlyRevenue": {}, "revenueByHost": {}}


@pytest.mark.asyncio
async def test_hosts_directory(traveler_client: AsyncClient, host, other_host, admin):
    response = await traveler_client.get("/api/hosts")
    assert response.status_code == 200
    hosts = response.json()
    assert [h["id"] for h in hosts] == [host.id, other_host.id]
    assert all(h["role"] == "host" for h in hosts)
    assert all("password" not in h for h in hosts)


@pytest.mark.asyncio
async def test_hosts_directory_requires_session(client: AsyncClient):
    response = await client.get("/api/hosts")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_booking_lifecycle_reaches_revenue(client: AsyncClient, admin_client: AsyncClient, host, booking_payload):
    """Traveler signs up and books, admin confirms, revenue picks it up."""
    registered = await client.post("/api/register", json={
        "name": "Tara Traveler",
        "email": "tara@example.com",
        "password": "goa-trip-2024",
    })
    assert registered.status_code == 201
    await client.post("/api/logout")

    login = await client.post("/api/login", json={"email": "tara@example.com", "password": "goa-trip-2024"})
    assert login.status_code == 200

    booking = (await client.post("/api/bookings", json=booking_payload(host.id))).json()
    assert booking["status"] == "pending"
    assert booking["userId"] == registered.json()["id"]

    before = (await admin_client.get("/api/admin/revenue")).json()
    assert before["totalRevenue"] == 0

    confirmed = await admin_client.patch(f"/api/bookings/{booking['id']}/status", json={"status": "confirmed"})
    assert confirmed.json()["status"] == "confirmed"

    report = (await admin_client.get("/api/admin/revenue")).json()
    assert report["totalRevenue"] == 20000
    assert report["monthlyRevenue"]["2024-01"] == 20000
    assert report["revenueByHost"][str(host.id)] == 20000
