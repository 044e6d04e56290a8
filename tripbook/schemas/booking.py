"""
Pydantic schemas for booking-related request/response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from tripbook.models.booking import BookingStatus
from tripbook.schemas.base import CamelModel


class BookingRecord(CamelModel):
    id: int
    user_id: int
    host_id: int
    title: str
    start_date: str
    end_date: str
    guests: str
    price: str
    notes: Optional[str] = None
    status: BookingStatus = BookingStatus.PENDING
    created_at: datetime


class BookingCreate(CamelModel):
    """
    Incoming booking. Required fields are checked by the booking service so
    each one gets its own message; status is decided by the creator's role.
    """
    title: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    guests: Optional[str] = None
    price: Optional[str] = None
    notes: Optional[str] = None
    host_id: Optional[int] = None

    @field_validator("guests", "price", mode="before")
    @classmethod
    def numbers_as_text(cls, v):
        # The UI sends these as numbers or strings; storage keeps strings
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class BookingStatusUpdate(CamelModel):
    status: BookingStatus
