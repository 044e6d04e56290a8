"""
Admin dashboard endpoints: users, all bookings, revenue.
Every route here requires the admin role.
"""

from fastapi import APIRouter, Depends

from tripbook.api.dependencies import get_storage, require_admin
from tripbook.db.storage import Storage
from tripbook.schemas import BookingRecord, MessageResponse, RevenueReport, UserRecord, UserResponse
from tripbook.services.booking_service import list_all_bookings
from tripbook.services.revenue_service import summarize_revenue
from tripbook.services.user_service import delete_user, list_users

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/users", response_model=list[UserResponse])
async def list_users_endpoint(
    admin: UserRecord = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    return await list_users(storage)


@router.get("/bookings", response_model=list[BookingRecord])
async def list_bookings_endpoint(
    admin: UserRecord = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    return await list_all_bookings(storage)


@router.get("/revenue", response_model=RevenueReport)
async def revenue_endpoint(
    admin: UserRecord = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    """
    Revenue from confirmed bookings: total, per month of the start date,
    and per host. Recomputed on every call.
    """
    return summarize_revenue(await list_all_bookings(storage))


@router.delete("/users/{user_id}", response_model=MessageResponse)
async def delete_user_endpoint(
    user_id: int,
    admin: UserRecord = Depends(require_admin),
    storage: Storage = Depends(get_storage),
):
    await delete_user(storage, admin, user_id)
    return MessageResponse(message="User deleted successfully")
