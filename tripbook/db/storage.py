"""
Storage container: the four repositories behind one object.

Built once in the application lifespan and handed to routes through the
get_storage dependency, never imported as a module-level singleton.
"""

from pathlib import Path
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from tripbook.core.config import Settings
from tripbook.core.logging import get_logger
from tripbook.db.json_store import JsonRepository
from tripbook.db.repository import Repository
from tripbook.db.session import build_engine, build_session_factory
from tripbook.db.sql_store import SqlRepository
from tripbook.models import Booking, Package, Post, User
from tripbook.schemas import BookingRecord, PackageRecord, PostRecord, UserRecord

logger = get_logger(__name__)

USER_UNIQUE_FIELDS = ("email",)

JSON_FILES = {
    "users": "users.json",
    "bookings": "bookings.json",
    "posts": "posts.json",
    "packages": "packages.json",
}


class Storage:
    def __init__(
        self,
        users: Repository[UserRecord],
        bookings: Repository[BookingRecord],
        posts: Repository[PostRecord],
        packages: Repository[PackageRecord],
        engine: Optional[AsyncEngine] = None,
    ):
        self.users = users
        self.bookings = bookings
        self.posts = posts
        self.packages = packages
        self.engine = engine

    async def close(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()


def json_storage(data_dir: Path) -> Storage:
    """File-backed storage. Creates the directory and empty files on first run."""
    repos = {
        "users": JsonRepository(data_dir / JSON_FILES["users"], UserRecord, "users", USER_UNIQUE_FIELDS),
        "bookings": JsonRepository(data_dir / JSON_FILES["bookings"], BookingRecord, "bookings"),
        "posts": JsonRepository(data_dir / JSON_FILES["posts"], PostRecord, "posts"),
        "packages": JsonRepository(data_dir / JSON_FILES["packages"], PackageRecord, "packages"),
    }
    for repo in repos.values():
        repo.ensure_file()
    return Storage(**repos)


def sql_storage(engine: AsyncEngine) -> Storage:
    session_factory = build_session_factory(engine)
    return Storage(
        users=SqlRepository(session_factory, User, UserRecord, "users", USER_UNIQUE_FIELDS),
        bookings=SqlRepository(session_factory, Booking, BookingRecord, "bookings"),
        posts=SqlRepository(session_factory, Post, PostRecord, "posts"),
        packages=SqlRepository(session_factory, Package, PackageRecord, "packages"),
        engine=engine,
    )


def create_storage(settings: Settings) -> Storage:
    backend = settings.STORAGE_BACKEND.lower()
    if backend == "json":
        logger.info("storage_selected", backend="json", data_dir=settings.DATA_DIR)
        return json_storage(Path(settings.DATA_DIR))
    if backend == "database":
        logger.info("storage_selected", backend="database")
        return sql_storage(build_engine(settings))
    raise ValueError(f"Unknown STORAGE_BACKEND {settings.STORAGE_BACKEND!r}; expected 'json' or 'database'")
