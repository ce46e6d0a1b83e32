"""
In-memory record storage.

Provides generic Create, Read, Update, Delete operations over dict records
keyed by string ID. Records are copied on the way in and out.

Dependencies: asyncio, copy, uuid
System role: Storage behind the mentor and session services
"""

import asyncio
import copy
import uuid
from datetime import datetime, timezone
from typing import Any, Callable


class InMemoryRepository:
    """
    Async CRUD over an in-process dict.

    Attributes:
        name: Collection name, used in log messages and errors
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._records: dict[str, dict[str, Any]] = {}
        self._lock = asyncio.Lock()

    async def create(self, **fields: Any) -> dict[str, Any]:
        """
        Store a new record.

        Args:
            **fields: Record fields; an "id" is generated when absent

        Returns:
            Stored record with id, createdAt and updatedAt
        """
        now = datetime.now(timezone.utc)
        record = {"id": fields.pop("id", None) or str(uuid.uuid4()), **fields}
        record.setdefault("createdAt", now)
        record.setdefault("updatedAt", now)
        async with self._lock:
            self._records[record["id"]] = record
        return copy.deepcopy(record)

    async def get_by_id(self, id: str) -> dict[str, Any] | None:
        """Return a copy of the record, or None if not found."""
        record = self._records.get(id)
        return copy.deepcopy(record) if record is not None else None

    async def get_all(
        self,
        where: Callable[[dict[str, Any]], bool] | None = None,
        order_by: str | tuple[str, ...] | None = None,
        descending: bool = False,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[dict[str, Any]]:
        """
        Return records matching a filter with pagination.

        Args:
            where: Predicate selecting records (all when None)
            order_by: Field, or fields in priority order, to sort on
            descending: Sort direction
            limit: Maximum number of records
            offset: Number of records to skip
        """
        records = [r for r in self._records.values() if where is None or where(r)]
        if order_by is not None:
            keys = (order_by,) if isinstance(order_by, str) else order_by
            records.sort(key=lambda r: tuple(r.get(k) for k in keys), reverse=descending)
        end = None if limit is None else offset + limit
        return [copy.deepcopy(r) for r in records[offset:end]]

    async def update_by_id(self, id: str, **fields: Any) -> dict[str, Any] | None:
        """Merge fields into a record; returns the updated copy or None if not found."""
        async with self._lock:
            record = self._records.get(id)
            if record is None:
                return None
            record.update(fields)
            record["updatedAt"] = datetime.now(timezone.utc)
            return copy.deepcopy(record)

    async def delete_by_id(self, id: str) -> bool:
        """Delete a record; returns False if it did not exist."""
        async with self._lock:
            return self._records.pop(id, None) is not None
