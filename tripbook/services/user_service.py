"""
User listings and admin account management.
"""

from fastapi import HTTPException, status

from tripbook.core.logging import get_logger
from tripbook.db.repository import RecordNotFoundError
from tripbook.db.storage import Storage
from tripbook.models.user import UserRole
from tripbook.schemas import UserRecord

logger = get_logger(__name__)


async def list_users(storage: Storage) -> list[UserRecord]:
    return await storage.users.list()


async def list_hosts(storage: Storage) -> list[UserRecord]:
    return await storage.users.list(role=UserRole.HOST)


async def delete_user(storage: Storage, admin: UserRecord, user_id: int) -> None:
    """
    Remove a user account. Their bookings and posts are left in place;
    any live session of theirs stops authenticating on its next request.
    """
    try:
        await storage.users.delete(user_id)
    except RecordNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    logger.info("user_deleted", user_id=user_id, deleted_by=admin.id)
