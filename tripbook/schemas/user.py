"""
Pydantic schemas for user-related request/response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, field_validator

from tripbook.models.user import UserRole
from tripbook.schemas.base import CamelModel


class UserRecord(CamelModel):
    """Stored user, including the password hash. Never returned to clients."""
    id: int
    name: str
    email: str
    password: str
    role: UserRole = UserRole.TRAVELER
    created_at: datetime


class UserCreate(CamelModel):
    # Presence is checked in the service so the client gets one combined message
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    role: Optional[str] = UserRole.TRAVELER.value

    @field_validator("name", "email", "password", mode="before")
    @classmethod
    def blank_as_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class UserLogin(CamelModel):
    # Any string: a malformed address is just a failed login (401), not a 400
    email: str
    password: str


class UserResponse(CamelModel):
    id: int
    name: str
    email: str
    role: UserRole
    created_at: datetime
