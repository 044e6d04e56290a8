from tripbook.schemas.base import CamelModel, MessageResponse
from tripbook.schemas.user import UserRecord, UserCreate, UserLogin, UserResponse
from tripbook.schemas.booking import BookingRecord, BookingCreate, BookingStatusUpdate
from tripbook.schemas.post import PostRecord, PostCreate
from tripbook.schemas.catalog import Destination, PackageRecord
from tripbook.schemas.revenue import RevenueReport

__all__ = [
    "CamelModel", "MessageResponse",
    "UserRecord", "UserCreate", "UserLogin", "UserResponse",
    "BookingRecord", "BookingCreate", "BookingStatusUpdate",
    "PostRecord", "PostCreate",
    "Destination", "PackageRecord",
    "RevenueReport",
]
