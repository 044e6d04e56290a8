"""
Database-backed repositories over SQLAlchemy async sessions.

Each operation runs in its own short transaction. Ids come from the
table's autoincrement primary key, which the database hands out atomically,
so concurrent creators never collide. Unique columns (users.email) are
guarded by the database; a violation surfaces as DuplicateRecordError.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tripbook.core.metrics import record_store_operation
from tripbook.db.base import Base
from tripbook.db.repository import DuplicateRecordError, RecordNotFoundError, RecordT, Repository


class SqlRepository(Repository[RecordT]):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        model: type[Base],
        record_type: type[RecordT],
        entity: str,
        unique_fields: Iterable[str] = (),
    ):
        self.session_factory = session_factory
        self.model = model
        self.record_type = record_type
        self.entity = entity
        self.unique_fields = tuple(unique_fields)

    def _to_record(self, row) -> RecordT:
        return self.record_type.model_validate(row)

    @staticmethod
    def _column_values(data: dict[str, Any]) -> dict[str, Any]:
        # Enum members are stored as their plain string value
        return {key: getattr(value, "value", value) for key, value in data.items()}

    def _violated_field(self, error: IntegrityError) -> Optional[str]:
        # SQLite: "UNIQUE constraint failed: users.email"; Postgres names the key in DETAIL
        message = str(error.orig)
        return next((field for field in self.unique_fields if field in message), None)

    async def _get_row(self, session: AsyncSession, record_id: int):
        row = await session.get(self.model, record_id)
        if row is None:
            raise RecordNotFoundError(self.entity, record_id)
        return row

    async def get(self, record_id: int) -> RecordT:
        record_store_operation(self.entity, "get")
        async with self.session_factory() as session:
            return self._to_record(await self._get_row(session, record_id))

    async def list(self, **filters: Any) -> list[RecordT]:
        record_store_operation(self.entity, "list")
        query = (
            select(self.model)
            .filter_by(**self._column_values(filters))
            .order_by(self.model.id.asc())
        )
        async with self.session_factory() as session:
            result = await session.execute(query)
            return [self._to_record(row) for row in result.scalars().all()]

    async def create(self, data: dict[str, Any]) -> RecordT:
        record_store_operation(self.entity, "create")
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    row = self.model(**self._column_values(data))
                    session.add(row)
                    await session.flush()
                    await session.refresh(row)
                    return self._to_record(row)
        except IntegrityError as e:
            field = self._violated_field(e)
            if field is None:
                raise
            raise DuplicateRecordError(self.entity, field) from e

    async def update(self, record_id: int, patch: dict[str, Any]) -> RecordT:
        record_store_operation(self.entity, "update")
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    row = await self._get_row(session, record_id)
                    for key, value in self._column_values(patch).items():
                        setattr(row, key, value)
                    await session.flush()
                    await session.refresh(row)
                    return self._to_record(row)
        except IntegrityError as e:
            field = self._violated_field(e)
            if field is None:
                raise
            raise DuplicateRecordError(self.entity, field) from e

    async def delete(self, record_id: int) -> None:
        record_store_operation(self.entity, "delete")
        async with self.session_factory() as session:
            async with session.begin():
                row = await self._get_row(session, record_id)
                await session.delete(row)
