from tripbook.models.user import User, UserRole
from tripbook.models.booking import Booking, BookingStatus
from tripbook.models.post import Post, PostStatus
from tripbook.models.package import Package

__all__ = [
    "User", "UserRole",
    "Booking", "BookingStatus",
    "Post", "PostStatus",
    "Package",
]
