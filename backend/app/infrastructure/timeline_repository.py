"""SQL Timeline Repository — TimelineRepository protocol for dated history tables.

Invariants:
    - Writes flush but never commit; transaction() is the unit of work
    - update() applies only writable keys present in `changes`; an explicit
      None clears a nullable column
    - delete_by_id() raises PersistenceError when zero rows were affected
    - find_all() orders by start_date, then id (oldest entry first)

Design Decisions:
    - One base class, one subclass per table (model, columns, entry name):
      career and education differ only in their descriptive columns
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ErrorContext, PersistenceError
from app.infrastructure.database import unit_of_work

logger = logging.getLogger(__name__)

TIMESTAMP_COLUMNS = ("created_at", "updated_at")


class SqlTimelineRepository:
    """Base for career/education persistence. Subclasses set the class attributes."""
    model: type
    entry_name: str
    writable: tuple[str, ...]

    def __init__(self, db: AsyncSession):
        self.db = db

    def _to_record(self, row) -> dict:
        return {
            column: getattr(row, column)
            for column in ("id", *self.writable, *TIMESTAMP_COLUMNS)
        }

    def transaction(self):
        return unit_of_work(self.db, f"{self.entry_name} write")

    async def _get_row(self, entry_id: int):
        result = await self.db.execute(
            select(self.model).where(self.model.id == entry_id),
        )
        return result.scalar_one_or_none()

    async def save(self, entry: dict) -> int:
        row = self.model(**{k: entry[k] for k in self.writable if k in entry})
        self.db.add(row)
        await self.db.flush()
        return row.id

    async def find_by_id(self, entry_id: int) -> dict | None:
        row = await self._get_row(entry_id)
        return self._to_record(row) if row else None

    async def update(self, entry: dict, changes: dict) -> dict:
        row = await self._get_row(entry["id"])
        if row is None:
            raise PersistenceError(
                f"{self.entry_name} {entry['id']} vanished before update", "update",
                ErrorContext(resource_id=entry["id"]),
            )
        for key, value in changes.items():
            if key in self.writable:
                setattr(row, key, value)
        await self.db.flush()
        await self.db.refresh(row)
        return self._to_record(row)

    async def delete_by_id(self, entry_id: int) -> int:
        result = await self.db.execute(
            delete(self.model).where(self.model.id == entry_id),
        )
        if not result.rowcount:
            logger.error(
                f"Delete affected no rows for {self.entry_name} {entry_id}",
                extra={"resource_id": entry_id, "operation": "delete"},
            )
            raise PersistenceError(
                f"{self.entry_name} {entry_id} could not be deleted", "delete",
                ErrorContext(resource_id=entry_id),
            )
        return entry_id

    async def find_all(self) -> list[dict]:
        result = await self.db.execute(
            select(self.model).order_by(self.model.start_date, self.model.id),
        )
        return [self._to_record(row) for row in result.scalars().all()]
