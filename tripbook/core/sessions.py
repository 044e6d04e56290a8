"""
Server-side session store.

A session maps an opaque id (sent to the browser in an HTTP-only cookie) to
the authenticated user's id. Entries expire after a fixed TTL, 24 hours by
default, counted from login.

Two backends:
  - MemorySessionStore: per-process dict, used in development and tests
  - RedisSessionStore: SETEX keys, survives restarts and is shared by workers

If Redis is enabled but unreachable at startup we fall back to memory so the
API keeps serving; sessions are then lost on restart.
"""

import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

import redis.asyncio as redis

from tripbook.core.config import Settings
from tripbook.core.logging import get_logger
from tripbook.core.security import new_session_id

logger = get_logger(__name__)


class SessionStore(ABC):
    def __init__(self, ttl_seconds: int):
        self.ttl_seconds = ttl_seconds

    @abstractmethod
    async def create(self, user_id: int) -> str:
        """Start a session for user_id and return its id."""

    @abstractmethod
    async def get(self, session_id: str) -> Optional[int]:
        """Return the user id for a live session, or None."""

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        ...

    async def close(self) -> None:
        pass


class MemorySessionStore(SessionStore):
    def __init__(self, ttl_seconds: int, clock: Callable[[], float] = time.monotonic):
        super().__init__(ttl_seconds)
        self._clock = clock
        self._sessions: dict[str, tuple[int, float]] = {}

    def _purge_expired(self) -> None:
        now = self._clock()
        expired = [sid for sid, (_, expires_at) in self._sessions.items() if expires_at <= now]
        for sid in expired:
            del self._sessions[sid]

    async def create(self, user_id: int) -> str:
        self._purge_expired()
        session_id = new_session_id()
        self._sessions[session_id] = (user_id, self._clock() + self.ttl_seconds)
        return session_id

    async def get(self, session_id: str) -> Optional[int]:
        entry = self._sessions.get(session_id)
        if entry is None:
            return None
        user_id, expires_at = entry
        if expires_at <= self._clock():
            del self._sessions[session_id]
            return None
        return user_id

    async def delete(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)


class RedisSessionStore(SessionStore):
    KEY_PREFIX = "session:"

    def __init__(self, client: redis.Redis, ttl_seconds: int):
        super().__init__(ttl_seconds)
        self._client = client

    def _key(self, session_id: str) -> str:
        return f"{self.KEY_PREFIX}{session_id}"

    async def create(self, user_id: int) -> str:
        session_id = new_session_id()
        await self._client.setex(self._key(session_id), self.ttl_seconds, str(user_id))
        return session_id

    async def get(self, session_id: str) -> Optional[int]:
        value = await self._client.get(self._key(session_id))
        return int(value) if value is not None else None

    async def delete(self, session_id: str) -> None:
        await self._client.delete(self._key(session_id))

    async def close(self) -> None:
        await self._client.aclose()


async def create_session_store(settings: Settings) -> SessionStore:
    if not settings.REDIS_ENABLED:
        return MemorySessionStore(settings.SESSION_TTL_SECONDS)

    client = redis.from_url(
        settings.REDIS_URL,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )
    try:
        await client.ping()
    except (redis.RedisError, OSError) as e:
        logger.warning("redis_unavailable", error=str(e), fallback="memory_sessions")
        await client.aclose()
        return MemorySessionStore(settings.SESSION_TTL_SECONDS)

    logger.info("redis_connected", url=settings.REDIS_URL)
    return RedisSessionStore(client, settings.SESSION_TTL_SECONDS)
