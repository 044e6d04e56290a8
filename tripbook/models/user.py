"""
User model with role and scrypt password hash.
"""

import enum

from sqlalchemy import CheckConstraint, Column, Integer, String

from tripbook.db.base import Base, TimestampMixin


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    TRAVELER = "traveler"
    HOST = "host"


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # "<scrypt hex>.<salt>"
    role = Column(String(20), nullable=False, default=UserRole.TRAVELER.value, index=True)

    __table_args__ = (
        CheckConstraint("role IN ('admin', 'traveler', 'host')", name="check_user_role"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
