"""SQL Personal Information Repository — singleton record over an AsyncSession.

Invariants:
    - Writes flush but never commit; commit belongs to singleton_guard
    - get() returns the oldest row (there is at most one in a healthy store)
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import GuardToken, PersonalInformationId
from app.core.errors import PersistenceError
from app.infrastructure.invariant_locks import InvariantLocks, guarded_transaction
from app.models.personal_information import PersonalInformation

_COLUMNS = (
    "id", "name", "birth_date", "gender", "address", "email", "contact",
    "created_at", "updated_at",
)
_WRITABLE = ("name", "birth_date", "gender", "address", "email", "contact")


def _to_record(row: PersonalInformation) -> dict:
    return {column: getattr(row, column) for column in _COLUMNS}


class SqlPersonalInformationRepository:
    """Personal information persistence backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession, locks: InvariantLocks):
        self.db = db
        self.locks = locks

    def singleton_guard(self):
        return guarded_transaction(
            self.db, self.locks, GuardToken.PERSONAL_INFORMATION_SINGLETON,
        )

    async def save(self, personal_information: dict) -> PersonalInformationId:
        row = PersonalInformation(
            **{k: personal_information[k] for k in _WRITABLE if k in personal_information},
        )
        self.db.add(row)
        await self.db.flush()
        return PersonalInformationId(row.id)

    async def count(self) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(PersonalInformation),
        )
        return result.scalar_one()

    async def _first_row(self) -> PersonalInformation | None:
        result = await self.db.execute(
            select(PersonalInformation).order_by(PersonalInformation.id).limit(1),
        )
        return result.scalar_one_or_none()

    async def get(self) -> dict | None:
        row = await self._first_row()
        return _to_record(row) if row else None

    async def update(self, personal_information: dict, changes: dict) -> dict:
        result = await self.db.execute(
            select(PersonalInformation)
            .where(PersonalInformation.id == personal_information["id"]),
        )
        row = result.scalar_one_or_none()
        if row is None:
            raise PersistenceError(
                "Personal information vanished before update", "update",
            )
        for key, value in changes.items():
            if key in _WRITABLE:
                setattr(row, key, value)
        await self.db.flush()
        await self.db.refresh(row)
        return _to_record(row)
