"""
Booking endpoints. Listing is scoped by role; status changes are for the
booking's host or an admin.
"""

from fastapi import APIRouter, Depends, status

from tripbook.api.dependencies import get_current_user, get_storage, require_roles
from tripbook.core.permissions import BOOKING_MODERATOR_ROLES
from tripbook.db.storage import Storage
from tripbook.schemas import BookingCreate, BookingRecord, BookingStatusUpdate, MessageResponse, UserRecord
from tripbook.services.booking_service import (
    create_booking,
    delete_booking,
    list_bookings_for,
    update_booking_status,
)

router = APIRouter(prefix="/bookings", tags=["Bookings"])


@router.get("", response_model=list[BookingRecord])
async def list_bookings(
    user: UserRecord = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """Admins get every booking, hosts those made with them, travelers their own."""
    return await list_bookings_for(storage, user)


@router.post("", response_model=BookingRecord, status_code=status.HTTP_201_CREATED)
async def create_booking_endpoint(
    booking_data: BookingCreate,
    user: UserRecord = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """
    Book a stay with a host.

    Starts as "pending" for travelers and hosts, "confirmed" when an admin
    books. Any status in the request body is ignored.
    """
    return await create_booking(storage, user, booking_data)


@router.patch("/{booking_id}/status", response_model=BookingRecord)
async def update_status_endpoint(
    booking_id: int,
    update: BookingStatusUpdate,
    user: UserRecord = Depends(require_roles(*BOOKING_MODERATOR_ROLES)),
    storage: Storage = Depends(get_storage),
):
    return await update_booking_status(storage, user, booking_id, update.status)


@router.delete("/{booking_id}", response_model=MessageResponse)
async def delete_booking_endpoint(
    booking_id: int,
    user: UserRecord = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    await delete_booking(storage, user, booking_id)
    return MessageResponse(message="Booking deleted successfully")
