"""
Role and ownership rules.

Pure functions of the caller and the record; the HTTP layer decides whether
a False means 401 or 403.

  Operation               | Allowed
  ------------------------+------------------------------------------------
  list all bookings       | admin
  create booking          | any authenticated user
  update booking status   | admin, host of the booking
  delete booking          | admin, host of the booking, owner
  create post             | admin, host
  delete post             | admin, owner
  admin endpoints         | admin
"""

from typing import Iterable

from tripbook.models.user import UserRole
from tripbook.schemas import BookingRecord, PostRecord, UserRecord

POST_AUTHOR_ROLES = frozenset({UserRole.ADMIN, UserRole.HOST})
BOOKING_MODERATOR_ROLES = frozenset({UserRole.ADMIN, UserRole.HOST})


def authorize(user: UserRecord, allowed_roles: Iterable[UserRole]) -> bool:
    return user.role in frozenset(allowed_roles)


def is_booking_host(user: UserRecord, booking: BookingRecord) -> bool:
    return user.role is UserRole.HOST and booking.host_id == user.id


def can_update_booking_status(user: UserRecord, booking: BookingRecord) -> bool:
    if user.role is UserRole.ADMIN:
        return True
    if user.role is UserRole.HOST:
        return booking.host_id == user.id
    if user.role is UserRole.TRAVELER:
        return False
    raise ValueError(f"Unhandled role {user.role!r}")


def can_delete_booking(user: UserRecord, booking: BookingRecord) -> bool:
    if user.role is UserRole.ADMIN:
        return True
    return is_booking_host(user, booking) or booking.user_id == user.id


def can_create_post(user: UserRecord) -> bool:
    return authorize(user, POST_AUTHOR_ROLES)


def can_delete_post(user: UserRecord, post: PostRecord) -> bool:
    return user.role is UserRole.ADMIN or post.user_id == user.id
