"""
Pytest fixtures for storage, sessions, HTTP clients and users.

Each test gets a fresh file-backed store in its own temp directory and a fresh
in-memory session store, wired into the app through dependency overrides.
"""

from typing import AsyncGenerator, Awaitable, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tripbook.api.dependencies import get_session_store, get_storage
from tripbook.core.config import get_settings
from tripbook.core.security import hash_password
from tripbook.core.sessions import MemorySessionStore
from tripbook.db.storage import Storage, json_storage
from tripbook.main import app
from tripbook.models.user import UserRole
from tripbook.schemas import UserRecord

TEST_PASSWORD = "testpassword123"


@pytest.fixture(scope="session")
def password_hash() -> str:
    """scrypt is slow; hash the shared test password once."""
    return hash_password(TEST_PASSWORD)


@pytest.fixture
def storage(tmp_path) -> Storage:
    return json_storage(tmp_path / "data")


@pytest.fixture
def sessions() -> MemorySessionStore:
    return MemorySessionStore(ttl_seconds=get_settings().SESSION_TTL_SECONDS)


@pytest_asyncio.fixture
async def client(storage: Storage, sessions: MemorySessionStore) -> AsyncGenerator[AsyncClient, None]:
    """Anonymous HTTP client with storage and sessions overridden."""
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_session_store] = lambda: sessions

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_for(
    client: AsyncClient,
    sessions: MemorySessionStore,
) -> AsyncGenerator[Callable[[UserRecord], Awaitable[AsyncClient]], None]:
    """Factory: an HTTP client already logged in as the given user."""
    opened = []

    async def _make(user: UserRecord) -> AsyncClient:
        session_id = await sessions.create(user.id)
        ac = AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
            cookies={get_settings().SESSION_COOKIE_NAME: session_id},
        )
        opened.append(ac)
        return ac

    yield _make

    for ac in opened:
        await ac.aclose()


@pytest.fixture
def make_user(storage: Storage, password_hash: str):
    async def _make(name: str, email: str, role: UserRole = UserRole.TRAVELER) -> UserRecord:
        return await storage.users.create({
            "name": name,
            "email": email,
            "password": password_hash,
            "role": role,
        })

    return _make


@pytest_asyncio.fixture
async def admin(make_user) -> UserRecord:
    return await make_user("Asha Admin", "admin@example.com", UserRole.ADMIN)


@pytest_asyncio.fixture
async def host(make_user) -> UserRecord:
    return await make_user("Hari Host", "host@example.com", UserRole.HOST)


@pytest_asyncio.fixture
async def other_host(make_user) -> UserRecord:
    return await make_user("Olga Host", "other.host@example.com", UserRole.HOST)


@pytest_asyncio.fixture
async def traveler(make_user) -> UserRecord:
    return await make_user("Tara Traveler", "traveler@example.com", UserRole.TRAVELER)


@pytest_asyncio.fixture
async def admin_client(client_for, admin) -> AsyncClient:
    return await client_for(admin)


@pytest_asyncio.fixture
async def host_client(client_for, host) -> AsyncClient:
    return await client_for(host)


@pytest_asyncio.fixture
async def other_host_client(client_for, other_host) -> AsyncClient:
    return await client_for(other_host)


@pytest_asyncio.fixture
async def traveler_client(client_for, traveler) -> AsyncClient:
    return await client_for(traveler)


@pytest.fixture
def booking_payload():
    """Factory for a valid booking request body."""

    def _payload(host_id: int, **overrides) -> dict:
        payload = {
            "title": "Goa Trip",
            "startDate": "2024-01-01",
            "endDate": "2024-01-05",
            "guests": "2",
            "price": "20000",
            "hostId": host_id,
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest_asyncio.fixture
async def pending_booking(traveler_client: AsyncClient, host: UserRecord, booking_payload) -> dict:
    """A traveler's booking with `host`, still pending."""
    response = await traveler_client.post("/api/bookings", json=booking_payload(host.id))
    assert response.status_code == 201
    return response.json()
