"""
Authentication service handling user registration and login.
"""

import asyncio

from fastapi import HTTPException, status

from tripbook.core.logging import get_logger
from tripbook.core.metrics import record_auth_attempt
from tripbook.core.security import hash_password, verify_password
from tripbook.db.repository import DuplicateRecordError
from tripbook.db.storage import Storage
from tripbook.models.user import UserRole
from tripbook.schemas import UserCreate, UserLogin, UserRecord

logger = get_logger(__name__)

VALID_ROLES = {role.value for role in UserRole}


async def register_user(storage: Storage, user_data: UserCreate) -> UserRecord:
    """
    Register a new user with a scrypt-hashed password.
    Raises 400 on missing fields, unknown role or an email already in use.
    """
    if not user_data.name or not user_data.email or not user_data.password:
        record_auth_attempt("register", success=False)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="All fields are required",
        )

    role = user_data.role or UserRole.TRAVELER.value
    if role not in VALID_ROLES:
        record_auth_attempt("register", success=False)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid role",
        )

    # scrypt blocks for tens of milliseconds; run it in a worker thread
    hashed = await asyncio.to_thread(hash_password, user_data.password)

    # The store rejects a taken email atomically with the insert
    try:
        user = await storage.users.create({
            "name": user_data.name.strip(),
            "email": user_data.email,
            "password": hashed,
            "role": role,
        })
    except DuplicateRecordError:
        logger.warning("registration_failed", reason="email_exists", email=user_data.email)
        record_auth_attempt("register", success=False)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already exists",
        )

    record_auth_attempt("register", success=True)
    logger.info("user_registered", user_id=user.id, email=user.email, role=user.role.value)
    return user


async def authenticate_user(storage: Storage, login_data: UserLogin) -> UserRecord:
    """
    Check credentials and return the user.
    Raises 401 if the email is unknown or the password does not match.
    """
    user = await storage.users.get_by(email=login_data.email)
    valid = user is not None and await asyncio.to_thread(
        verify_password, login_data.password, user.password
    )

    if not valid:
        record_auth_attempt("login", success=False)
        logger.warning("login_failed", email=login_data.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    record_auth_attempt("login", success=True)
    logger.info("user_logged_in", user_id=user.id)
    return user
