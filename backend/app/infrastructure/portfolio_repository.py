"""SQL Portfolio Repository — PortfolioRepository protocol over an AsyncSession.

Invariants:
    - Writes flush but never commit; commit belongs to main_invariant_guard
    - Records leave this module as plain dicts (core never sees ORM objects)
    - update() applies only keys present in `changes` (field-level merge)
    - delete_by_id() raises PersistenceError when zero rows were affected

Design Decisions:
    - Flush after every write: clears are sent before the new main is set, so
      the partial unique index never sees two main rows mid-transaction
    - Lookups re-select by id instead of holding ORM instances across calls:
      the service passes records, not identities, between steps
"""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import GuardToken, OrderDirection, PortfolioId
from app.core.errors import PersistenceError
from app.infrastructure.invariant_locks import InvariantLocks, guarded_transaction
from app.models.portfolio import Portfolio

logger = logging.getLogger(__name__)

_COLUMNS = (
    "id", "title", "content_format", "content", "main_state",
    "created_at", "updated_at",
)
_WRITABLE = ("title", "content_format", "content", "main_state")


def _to_record(row: Portfolio) -> dict:
    return {column: getattr(row, column) for column in _COLUMNS}


class SqlPortfolioRepository:
    """Portfolio persistence backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession, locks: InvariantLocks):
        self.db = db
        self.locks = locks

    def main_invariant_guard(self):
        return guarded_transaction(
            self.db, self.locks, GuardToken.PORTFOLIO_MAIN_INVARIANT,
        )

    async def save(self, portfolio: dict) -> PortfolioId:
        row = Portfolio(**{k: portfolio[k] for k in _WRITABLE if k in portfolio})
        self.db.add(row)
        await self.db.flush()
        return PortfolioId(row.id)

    async def _get_row(self, portfolio_id: PortfolioId) -> Portfolio | None:
        result = await self.db.execute(
            select(Portfolio).where(Portfolio.id == portfolio_id),
        )
        return result.scalar_one_or_none()

    async def find_by_id(self, portfolio_id: PortfolioId) -> dict | None:
        row = await self._get_row(portfolio_id)
        return _to_record(row) if row else None

    async def find_by_main_state(self, main_state: bool) -> list[dict]:
        result = await self.db.execute(
            select(Portfolio)
            .where(Portfolio.main_state == main_state)
            .order_by(Portfolio.created_at, Portfolio.id),
        )
        return [_to_record(row) for row in result.scalars().all()]

    async def count(self) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(Portfolio),
        )
        return result.scalar_one()

    async def update(self, portfolio: dict, changes: dict) -> dict:
        row = await self._get_row(portfolio["id"])
        if row is None:
            raise PersistenceError(
                f"Portfolio {portfolio['id']} vanished before update", "update",
            )
        for key, value in changes.items():
            if key in _WRITABLE:
                setattr(row, key, value)
        await self.db.flush()
        await self.db.refresh(row)
        return _to_record(row)

    async def delete_by_id(self, portfolio_id: PortfolioId) -> PortfolioId:
        result = await self.db.execute(
            delete(Portfolio).where(Portfolio.id == portfolio_id),
        )
        if not result.rowcount:
            logger.error(
                f"Delete affected no rows for portfolio {portfolio_id}",
                extra={"portfolio_id": portfolio_id, "operation": "delete"},
            )
            raise PersistenceError(
                f"Portfolio {portfolio_id} could not be deleted", "delete",
            )
        return portfolio_id

    async def find_all_with_paging(
        self, offset: int, limit: int, order: OrderDirection,
    ) -> tuple[list[dict], int]:
        if order == OrderDirection.ASC:
            ordering = (Portfolio.created_at.asc(), Portfolio.id.asc())
        else:
            ordering = (Portfolio.created_at.desc(), Portfolio.id.desc())
        result = await self.db.execute(
            select(Portfolio).order_by(*ordering).offset(offset).limit(limit),
        )
        rows = result.scalars().all()
        return [_to_record(row) for row in rows], await self.count()
