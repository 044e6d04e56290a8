"""
Authentication endpoints: register, login, logout and the current user.

A successful register or login starts a server-side session and sets its id
in an HTTP-only cookie that lives as long as the session (24h by default).
"""

from fastapi import APIRouter, Depends, Request, Response, status

from tripbook.api.dependencies import get_current_user, get_session_store, get_storage
from tripbook.core.config import get_settings
from tripbook.core.sessions import SessionStore
from tripbook.db.storage import Storage
from tripbook.schemas import MessageResponse, UserCreate, UserLogin, UserRecord, UserResponse
from tripbook.services.auth_service import authenticate_user, register_user

router = APIRouter(tags=["Authentication"])


async def _start_session(response: Response, sessions: SessionStore, user: UserRecord) -> None:
    settings = get_settings()
    session_id = await sessions.create(user.id)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session_id,
        max_age=sessions.ttl_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    response: Response,
    storage: Storage = Depends(get_storage),
    sessions: SessionStore = Depends(get_session_store),
):
    """Register a new account and log it in."""
    user = await register_user(storage, user_data)
    await _start_session(response, sessions, user)
    return user


@router.post("/login", response_model=UserResponse)
async def login(
    login_data: UserLogin,
    response: Response,
    storage: Storage = Depends(get_storage),
    sessions: SessionStore = Depends(get_session_store),
):
    user = await authenticate_user(storage, login_data)
    await _start_session(response, sessions, user)
    return user


@router.post("/logout", response_model=MessageResponse)
async def logout(
    request: Request,
    response: Response,
    sessions: SessionStore = Depends(get_session_store),
):
    """End the current session. Succeeds even without one."""
    cookie_name = get_settings().SESSION_COOKIE_NAME
    session_id = request.cookies.get(cookie_name)
    if session_id:
        await sessions.delete(session_id)
    response.delete_cookie(cookie_name)
    return MessageResponse(message="Logged out successfully")


@router.get("/user", response_model=UserResponse)
async def current_user(user: UserRecord = Depends(get_current_user)):
    return user
