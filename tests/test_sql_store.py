"""
Tests for the database-backed repositories, run against SQLite.
"""

import asyncio

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine

from tripbook.db.base import Base
from tripbook.db.repository import DuplicateRecordError, RecordNotFoundError
from tripbook.db.storage import sql_storage
from tripbook.models.booking import BookingStatus
from tripbook.models.user import UserRole


@pytest_asyncio.fixture
async def storage(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'tripbook.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    storage = sql_storage(engine)
    yield storage
    await storage.close()


def booking_data(**overrides):
    data = {
        "user_id": 1,
        "host_id": 2,
        "title": "Kerala Backwaters",
        "start_date": "2024-04-01",
        "end_date": "2024-04-04",
        "guests": "4",
        "price": "32000",
        "status": BookingStatus.PENDING,
    }
    data.update(overrides)
    return data


@pytest.mark.asyncio
async def test_create_and_get_user(storage):
    user = await storage.users.create({
        "name": "Hari Host",
        "email": "host@example.com",
        "password": "abc.def",
        "role": UserRole.HOST,
    })
    assert user.id == 1
    assert user.role is UserRole.HOST
    assert user.created_at is not None

    fetched = await storage.users.get(user.id)
    assert fetched.email == "host@example.com"


@pytest.mark.asyncio
async def test_list_filters_by_enum(storage):
    for i, role in enumerate([UserRole.HOST, UserRole.TRAVELER, UserRole.HOST]):
        await storage.users.create({
            "name": f"user{i}",
            "email": f"user{i}@example.com",
            "password": "abc.def",
            "role": role,
        })
    hosts = await storage.users.list(role=UserRole.HOST)
    assert [u.id for u in hosts] == [1, 3]


@pytest.mark.asyncio
async def test_booking_status_update(storage):
    booking = await storage.bookings.create(booking_data())
    assert booking.status is BookingStatus.PENDING

    updated = await storage.bookings.update(booking.id, {"status": BookingStatus.CONFIRMED})
    assert updated.status is BookingStatus.CONFIRMED
    assert updated.title == "Kerala Backwaters"


@pytest.mark.asyncio
async def test_delete_and_not_found(storage):
    booking = await storage.bookings.create(booking_data())
    await storage.bookings.delete(booking.id)

    with pytest.raises(RecordNotFoundError):
        await storage.bookings.get(booking.id)
    with pytest.raises(RecordNotFoundError):
        await storage.bookings.update(booking.id, {"status": BookingStatus.CANCELLED})
    with pytest.raises(RecordNotFoundError):
        await storage.bookings.delete(booking.id)


@pytest.mark.asyncio
async def test_concurrent_creates_get_unique_ids(storage):
    created = await asyncio.gather(*(
        storage.bookings.create(booking_data(title=f"Trip {i}")) for i in range(10)
    ))
    assert len({b.id for b in created}) == 10


@pytest.mark.asyncio
async def test_packages_by_destination(storage):
    for destination_id in ("goa", "goa", "munnar"):
        await storage.packages.create({
            "destination_id": destination_id,
            "name": f"{destination_id} package",
            "description": "desc",
            "duration": "3 days",
            "price": "9000",
            "inclusions": "Stay",
            "exclusions": "Flights",
        })
    assert len(await storage.packages.list(destination_id="goa")) == 2
    assert await storage.packages.list(destination_id="ladakh") == []


@pytest.mark.asyncio
async def test_duplicate_email_raises_duplicate_error(storage):
    user = {"name": "Tara", "email": "tara@example.com", "password": "abc.def", "role": UserRole.TRAVELER}
    await storage.users.create(user)

    with pytest.raises(DuplicateRecordError) as excinfo:
        await storage.users.create({**user, "name": "Impostor"})
    assert excinfo.value.field == "email"
    assert len(await storage.users.list()) == 1
