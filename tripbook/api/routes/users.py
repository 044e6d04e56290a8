"""
User directory endpoints available to any signed-in user.
"""

from fastapi import APIRouter, Depends

from tripbook.api.dependencies import get_current_user, get_storage
from tripbook.db.storage import Storage
from tripbook.schemas import UserRecord, UserResponse
from tripbook.services.user_service import list_hosts

router = APIRouter(tags=["Users"])


@router.get("/hosts", response_model=list[UserResponse])
async def list_hosts_endpoint(
    user: UserRecord = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
):
    """Hosts a traveler can book with. Password hashes are never included."""
    return await list_hosts(storage)
