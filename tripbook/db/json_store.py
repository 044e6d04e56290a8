"""
File-backed repositories: one pretty-printed JSON array per entity.

ID ASSIGNMENT
=============

New ids are max(existing) + 1, or 1 for an empty file. The whole
read-modify-write of a create/update/delete runs under a per-collection
asyncio.Lock, so two requests creating bookings at the same moment cannot
both read the same max id and write duplicates.

The lock is per process. Running several workers against one data directory
is not supported; use the database backend for that.

Writes go to a temp file that is then renamed over the original, so a reader
never sees a half-written array. Blocking file I/O runs in a worker thread.

Fields listed in unique_fields (email for users) are checked against the
loaded records under the same lock, so two concurrent registrations with one
address cannot both be written.
"""

from __future__ import annotations

import asyncio
import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable

from tripbook.core.metrics import record_store_operation
from tripbook.db.repository import DuplicateRecordError, RecordNotFoundError, RecordT, Repository


class JsonRepository(Repository[RecordT]):
    def __init__(
        self,
        path: Path,
        record_type: type[RecordT],
        entity: str,
        unique_fields: Iterable[str] = (),
    ):
        self.path = path
        self.record_type = record_type
        self.entity = entity
        self.unique_fields = tuple(unique_fields)
        self._lock = asyncio.Lock()

    def ensure_file(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self.path.write_text("[]", encoding="utf-8")

    def _read(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            return []
        with self.path.open(encoding="utf-8") as f:
            return json.load(f)

    def _write(self, rows: list[dict[str, Any]]) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(rows, f, indent=2)
        os.replace(tmp_path, self.path)

    async def _load(self) -> list[RecordT]:
        rows = await asyncio.to_thread(self._read)
        return [self.record_type.model_validate(row) for row in rows]

    async def _save(self, records: list[RecordT]) -> None:
        rows = [record.model_dump(mode="json", by_alias=True) for record in records]
        await asyncio.to_thread(self._write, rows)

    def _check_unique(self, records: list[RecordT], candidate: RecordT) -> None:
        for field in self.unique_fields:
            value = getattr(candidate, field)
            for record in records:
                if record.id != candidate.id and getattr(record, field) == value:
                    raise DuplicateRecordError(self.entity, field)

    @staticmethod
    def _index_of(records: list[RecordT], record_id: int) -> int:
        for index, record in enumerate(records):
            if record.id == record_id:
                return index
        return -1

    async def get(self, record_id: int) -> RecordT:
        record_store_operation(self.entity, "get")
        records = await self._load()
        index = self._index_of(records, record_id)
        if index == -1:
            raise RecordNotFoundError(self.entity, record_id)
        return records[index]

    async def list(self, **filters: Any) -> list[RecordT]:
        record_store_operation(self.entity, "list")
        records = await self._load()
        matches = [
            record for record in records
            if all(getattr(record, field) == value for field, value in filters.items())
        ]
        return sorted(matches, key=lambda record: record.id)

    async def create(self, data: dict[str, Any]) -> RecordT:
        record_store_operation(self.entity, "create")
        async with self._lock:
            records = await self._load()
            next_id = max((record.id for record in records), default=0) + 1
            record = self.record_type.model_validate({
                **data,
                "id": next_id,
                "created_at": datetime.now(timezone.utc),
            })
            self._check_unique(records, record)
            records.append(record)
            await self._save(records)
        return record

    async def update(self, record_id: int, patch: dict[str, Any]) -> RecordT:
        record_store_operation(self.entity, "update")
        async with self._lock:
            records = await self._load()
            index = self._index_of(records, record_id)
            if index == -1:
                raise RecordNotFoundError(self.entity, record_id)
            merged = {**records[index].model_dump(), **patch, "id": record_id}
            updated = self.record_type.model_validate(merged)
            self._check_unique(records, updated)
            records[index] = updated
            await self._save(records)
        return records[index]

    async def delete(self, record_id: int) -> None:
        record_store_operation(self.entity, "delete")
        async with self._lock:
            records = await self._load()
            index = self._index_of(records, record_id)
            if index == -1:
                raise RecordNotFoundError(self.entity, record_id)
            del records[index]
            await self._save(records)
