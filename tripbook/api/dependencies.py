"""
FastAPI dependencies: injected storage/session store and the current user.

Not authenticated (no cookie, unknown or expired session, deleted user)
is a 401. Authenticated with the wrong role is a 403.
"""

from fastapi import Depends, HTTPException, Request, status

from tripbook.core.config import get_settings
from tripbook.core.logging import get_logger
from tripbook.core.permissions import authorize
from tripbook.core.sessions import SessionStore
from tripbook.db.repository import RecordNotFoundError
from tripbook.db.storage import Storage
from tripbook.models.user import UserRole
from tripbook.schemas import UserRecord

logger = get_logger(__name__)


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def _not_authenticated() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
    )


async def get_current_user(
    request: Request,
    storage: Storage = Depends(get_storage),
    sessions: SessionStore = Depends(get_session_store),
) -> UserRecord:
    session_id = request.cookies.get(get_settings().SESSION_COOKIE_NAME)
    if not session_id:
        raise _not_authenticated()

    user_id = await sessions.get(session_id)
    if user_id is None:
        raise _not_authenticated()

    try:
        return await storage.users.get(user_id)
    except RecordNotFoundError:
        # User was deleted while the session was still live
        await sessions.delete(session_id)
        logger.info("session_dropped", reason="user_deleted", user_id=user_id)
        raise _not_authenticated()


def require_roles(*roles: UserRole):
    """Dependency factory: the current user, provided their role is in roles."""

    async def checker(user: UserRecord = Depends(get_current_user)) -> UserRecord:
        if not authorize(user, roles):
            logger.warning("access_denied", user_id=user.id, role=user.role.value)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return user

    return checker


require_admin = require_roles(UserRole.ADMIN)
