"""
Booking model: a traveler's stay request against a host.

Key design decisions:
- No foreign keys on user_id/host_id: deleting a user leaves their bookings
  in place, matching the file-backed store
- Dates, guests and price are kept as the strings the client sent
- Status transitions are not constrained here, only the value set
"""

import enum

from sqlalchemy import CheckConstraint, Column, Integer, String, Text

from tripbook.db.base import Base, TimestampMixin


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class Booking(Base, TimestampMixin):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    host_id = Column(Integer, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    start_date = Column(String(32), nullable=False)
    end_date = Column(String(32), nullable=False)
    guests = Column(String(32), nullable=False)
    price = Column(String(32), nullable=False)
    notes = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=BookingStatus.PENDING.value, index=True)

    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'confirmed', 'cancelled', 'completed')",
            name="check_booking_status",
        ),
    )

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, user={self.user_id}, host={self.host_id}, status={self.status})>"
