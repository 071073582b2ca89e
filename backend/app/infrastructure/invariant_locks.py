"""Invariant Locks — exclusive, transactional sections keyed on fixed resource tokens.

Invariants:
    - One asyncio.Lock per token per registry; same token => same lock
    - guarded_transaction is a unit_of_work (database.py) run while holding the
      token's lock: one commit on success, rollback on any exception
    - On PostgreSQL a transaction-scoped advisory lock is taken as well, so writers
      in other worker processes are serialized too; it is released by commit/rollback

Design Decisions:
    - Registry created on startup (lifespan), not at import: asyncio primitives
      belong to the running loop (ADR: no global import side effects)
    - Advisory lock keyed by hashtext(token): no lock table, no migration
    - SQLite needs no advisory lock: its writers are already serialized by the
      database file lock, and the in-process lock covers the read-then-write gap
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import GuardToken
from app.infrastructure.database import unit_of_work

logger = logging.getLogger(__name__)


class InvariantLocks:
    """Keyed registry of in-process write locks."""

    def __init__(self):
        self._locks: dict[GuardToken, asyncio.Lock] = {}

    def get(self, token: GuardToken) -> asyncio.Lock:
        lock = self._locks.get(token)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[token] = lock
        return lock


@asynccontextmanager
async def guarded_transaction(
    db: AsyncSession, locks: InvariantLocks, token: GuardToken,
) -> AsyncGenerator[None, None]:
    """Run the body as one exclusive unit of work on the given session."""
    async with locks.get(token):
        async with unit_of_work(db, token.value):
            if db.get_bind().dialect.name == "postgresql":
                await db.execute(
                    text("SELECT pg_advisory_xact_lock(hashtext(:token))"),
                    {"token": token.value},
                )
            yield


# Singleton (initialized on startup)
invariant_locks: InvariantLocks | None = None


def init_invariant_locks() -> None:
    global invariant_locks
    invariant_locks = InvariantLocks()


def get_invariant_locks() -> InvariantLocks:
    """FastAPI dependency for the process-wide lock registry."""
    if not invariant_locks:
        raise RuntimeError("Invariant locks not initialized")
    return invariant_locks
