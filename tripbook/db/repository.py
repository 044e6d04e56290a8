"""
Repository contract shared by the file-backed and database-backed stores.

Every entity gets the same five operations: get, list, create, update,
delete. Results are typed pydantic records validated at the store boundary.
Atomicity is per record; nothing here spans several records or cascades.
Unique fields (a user's email) are enforced by the store itself, so a
check-then-create in a service cannot race two equal values in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound=BaseModel)


class RecordNotFoundError(LookupError):
    """Raised by get/update/delete when no record has the given id."""

    def __init__(self, entity: str, record_id: int):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} {record_id} not found")


class DuplicateRecordError(ValueError):
    """Raised by create/update when a unique field value is already taken."""

    def __init__(self, entity: str, field: str):
        self.entity = entity
        self.field = field
        super().__init__(f"{entity} with this {field} already exists")


class Repository(ABC, Generic[RecordT]):
    entity: str

    @abstractmethod
    async def get(self, record_id: int) -> RecordT:
        ...

    @abstractmethod
    async def list(self, **filters: Any) -> list[RecordT]:
        """Records whose attributes equal every filter value, in id order."""

    @abstractmethod
    async def create(self, data: dict[str, Any]) -> RecordT:
        """Insert a record. id and created_at are assigned by the store."""

    @abstractmethod
    async def update(self, record_id: int, patch: dict[str, Any]) -> RecordT:
        ...

    @abstractmethod
    async def delete(self, record_id: int) -> None:
        ...

    async def get_by(self, **filters: Any) -> Optional[RecordT]:
        matches = await self.list(**filters)
        return matches[0] if matches else None
