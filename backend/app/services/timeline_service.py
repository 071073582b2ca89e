"""Timeline Service — create, update, delete and list dated history entries.

Serves both career and education: the repository decides the table, the
service owns the rules.

Invariants:
    - end_date is never before start_date, on create and on the merged record
      after an update (period checked before any write)
    - Every write runs inside repository.transaction(): one commit or a full rollback
    - A missing entry is 404 before anything is written
"""

import logging

from app.core.errors import ErrorContext, PersistenceError, ResourceNotFoundError
from app.core.portfolio_rules import is_usable_id
from app.core.repository_protocols import TimelineRepository
from app.core.timeline_rules import check_period, merged_period

logger = logging.getLogger(__name__)


class TimelineService:
    """History entries of one kind (entry_name: "Career", "Education")."""

    def __init__(self, repository: TimelineRepository, entry_name: str):
        self.repository = repository
        self.entry_name = entry_name

    async def _require(self, entry_id: int) -> dict:
        entry = await self.repository.find_by_id(entry_id)
        if entry is None:
            raise ResourceNotFoundError(
                self.entry_name, str(entry_id), ErrorContext(resource_id=entry_id),
            )
        return entry

    def _reject_bad_period(self, start_date, end_date, entry_id: int | None, operation: str):
        error = check_period(start_date, end_date, entry_id)
        if error:
            logger.warning(
                f"{self.entry_name} {operation} rejected: {error.message}",
                extra={"resource_id": entry_id, "error_code": error.code, "operation": operation},
            )
            raise error

    async def create(self, fields: dict) -> int:
        self._reject_bad_period(fields["start_date"], fields.get("end_date"), None, "create")
        async with self.repository.transaction():
            entry_id = await self.repository.save(fields)
            if not is_usable_id(entry_id):
                raise PersistenceError(
                    f"{self.entry_name} could not be stored", "create",
                )

        logger.info(
            f"{self.entry_name} {entry_id} created",
            extra={"resource_id": entry_id, "operation": "create"},
        )
        return entry_id

    async def update(self, entry_id: int, changes: dict) -> int:
        """Merge supplied fields. An explicit None clears end_date (or degree)."""
        async with self.repository.transaction():
            entry = await self._require(entry_id)
            self._reject_bad_period(*merged_period(entry, changes), entry_id, "update")
            updated = await self.repository.update(entry, changes)

        logger.info(
            f"{self.entry_name} {entry_id} updated ({', '.join(sorted(changes))})",
            extra={"resource_id": entry_id, "operation": "update"},
        )
        return updated["id"]

    async def delete(self, entry_id: int) -> int:
        async with self.repository.transaction():
            entry = await self._require(entry_id)
            deleted_id = await self.repository.delete_by_id(entry["id"])

        logger.info(
            f"{self.entry_name} {deleted_id} deleted",
            extra={"resource_id": deleted_id, "operation": "delete"},
        )
        return deleted_id

    async def list_entries(self) -> list[dict]:
        """All entries, oldest start_date first."""
        return await self.repository.find_all()
