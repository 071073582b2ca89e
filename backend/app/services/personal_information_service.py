"""Personal Information Service — create-once, then get/update the owner profile.

Invariants:
    - At most one record exists: create is rejected when count() > 0
    - create runs inside repository.singleton_guard() (count and insert are one unit)
    - update merges only the supplied fields
"""

import logging

from app.core.domain_types import PersonalInformationId
from app.core.errors import (
    PersistenceError, PersonalInformationExistsError, ResourceNotFoundError,
)
from app.core.portfolio_rules import is_usable_id
from app.core.repository_protocols import PersonalInformationRepository

logger = logging.getLogger(__name__)


class PersonalInformationService:
    """Singleton profile record management."""

    def __init__(self, repository: PersonalInformationRepository):
        self.repository = repository

    async def _require(self) -> dict:
        record = await self.repository.get()
        if record is None:
            raise ResourceNotFoundError("Personal information", "singleton")
        return record

    async def create(self, fields: dict) -> PersonalInformationId:
        async with self.repository.singleton_guard():
            if await self.repository.count() > 0:
                error = PersonalInformationExistsError()
                logger.error(
                    "Refused to create a second personal information record",
                    extra={"error_code": error.code, "operation": "create"},
                )
                raise error
            record_id = await self.repository.save(fields)
            if not is_usable_id(record_id):
                raise PersistenceError(
                    "Personal information could not be stored", "create",
                )

        logger.info(
            f"Personal information {record_id} created",
            extra={"operation": "create"},
        )
        return record_id

    async def get(self) -> dict:
        return await self._require()

    async def update(self, changes: dict) -> PersonalInformationId:
        supplied = {k: v for k, v in changes.items() if v is not None}
        async with self.repository.singleton_guard():
            record = await self._require()
            updated = await self.repository.update(record, supplied)

        logger.info(
            f"Personal information {updated['id']} updated",
            extra={"operation": "update"},
        )
        return PersonalInformationId(updated["id"])
