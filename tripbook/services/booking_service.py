"""
Booking lifecycle.

STATUS MODEL
============

  pending ──> confirmed ──> cancelled
     │                        ^
     └────────────────────────┘
  any ──> completed  (explicit update only)

  - A booking starts "confirmed" when an admin creates it, "pending" otherwise.
    Whatever status the client sends on creation is ignored.
  - The status update accepts any of the four values from any current state.
    Which transitions should be refused (e.g. reopening a cancelled booking)
    is still an open product question, so none are refused here.
  - Nothing moves automatically: bookings never auto-complete or expire.

Who may do what is decided in tripbook.core.permissions.
"""

from fastapi import HTTPException, status

from tripbook.core.logging import get_logger
from tripbook.core.metrics import record_booking_created, record_status_update
from tripbook.core.permissions import can_delete_booking, can_update_booking_status
from tripbook.db.repository import RecordNotFoundError
from tripbook.db.storage import Storage
from tripbook.models.booking import BookingStatus
from tripbook.models.user import UserRole
from tripbook.schemas import BookingCreate, BookingRecord, UserRecord

logger = get_logger(__name__)

REQUIRED_FIELDS = (
    ("title", "Title is required"),
    ("start_date", "Start date is required"),
    ("end_date", "End date is required"),
    ("guests", "Guests information is required"),
    ("price", "Price is required"),
)


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _clean(value):
    if isinstance(value, str):
        value = value.strip()
    return value or None


def initial_status(creator: UserRecord) -> BookingStatus:
    if creator.role is UserRole.ADMIN:
        return BookingStatus.CONFIRMED
    return BookingStatus.PENDING


async def _get_booking_or_404(storage: Storage, booking_id: int) -> BookingRecord:
    try:
        return await storage.bookings.get(booking_id)
    except RecordNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Booking not found",
        )


async def list_bookings_for(storage: Storage, user: UserRecord) -> list[BookingRecord]:
    """Admins see everything, hosts see bookings made with them, travelers their own."""
    if user.role is UserRole.ADMIN:
        return await storage.bookings.list()
    if user.role is UserRole.HOST:
        return await storage.bookings.list(host_id=user.id)
    return await storage.bookings.list(user_id=user.id)


async def list_all_bookings(storage: Storage) -> list[BookingRecord]:
    return await storage.bookings.list()


async def create_booking(
    storage: Storage,
    user: UserRecord,
    booking_data: BookingCreate,
) -> BookingRecord:
    """
    Create a booking owned by user.
    The end date is not checked against the start date.
    """
    if booking_data.host_id is None or booking_data.host_id < 1:
        raise _bad_request("Host selection is required")

    fields = {name: _clean(getattr(booking_data, name)) for name, _ in REQUIRED_FIELDS}
    for name, message in REQUIRED_FIELDS:
        if fields[name] is None:
            raise _bad_request(message)

    status_value = initial_status(user)
    booking = await storage.bookings.create({
        **fields,
        "user_id": user.id,
        "host_id": booking_data.host_id,
        "notes": _clean(booking_data.notes),
        "status": status_value,
    })

    record_booking_created(status_value.value)
    logger.info(
        "booking_created",
        booking_id=booking.id,
        user_id=user.id,
        host_id=booking.host_id,
        status=booking.status.value,
    )
    return booking


async def update_booking_status(
    storage: Storage,
    user: UserRecord,
    booking_id: int,
    new_status: BookingStatus,
) -> BookingRecord:
    """Set a booking's status. Hosts may only touch bookings made with them."""
    booking = await _get_booking_or_404(storage, booking_id)

    if not can_update_booking_status(user, booking):
        logger.warning("booking_update_denied", booking_id=booking_id, user_id=user.id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to update this booking",
        )

    try:
        updated = await storage.bookings.update(booking_id, {"status": new_status})
    except RecordNotFoundError:
        # Deleted between the lookup and the write
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Booking not found",
        )

    record_status_update(new_status.value)
    logger.info(
        "booking_status_updated",
        booking_id=booking_id,
        user_id=user.id,
        old_status=booking.status.value,
        new_status=new_status.value,
    )
    return updated


async def delete_booking(storage: Storage, user: UserRecord, booking_id: int) -> None:
    booking = await _get_booking_or_404(storage, booking_id)

    if not can_delete_booking(user, booking):
        logger.warning("booking_delete_denied", booking_id=booking_id, user_id=user.id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this booking",
        )

    try:
        await storage.bookings.delete(booking_id)
    except RecordNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Booking not found",
        )

    logger.info("booking_deleted", booking_id=booking_id, user_id=user.id)
