"""Database Session Manager — async engine, per-request sessions and units of work.

Invariants:
    - One AsyncSession per request; it is closed when the request ends
    - Repositories flush, units of work commit: unit_of_work() commits once on
      success and rolls back on any exception
    - Every SQLAlchemyError leaving this module is a DatabaseError
      (core/errors.py) that names the failed operation
    - A second main portfolio rejected by uq_portfolios_single_main is reported
      as such, not as a generic integrity failure

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
      (ADR: no global import side effects)
    - expire_on_commit=False: records are read after commit to build responses
    - Pool sizing skipped for SQLite: aiosqlite uses a static/null pool that
      rejects pool_size and max_overflow
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from app.core.errors import DatabaseError

logger = logging.getLogger(__name__)

# PostgreSQL reports the index name, SQLite the indexed column.
_SINGLE_MAIN_MARKERS = ("uq_portfolios_single_main", "portfolios.main_state")


def map_sqlalchemy_error(exc: SQLAlchemyError, operation: str) -> DatabaseError:
    """Translate an ORM/driver failure into a DatabaseError for `operation`."""
    if isinstance(exc, IntegrityError):
        detail = str(exc.orig)
        if any(marker in detail for marker in _SINGLE_MAIN_MARKERS):
            return DatabaseError("a second main portfolio was rejected", operation)
        return DatabaseError("integrity constraint violated", operation)
    if isinstance(exc, OperationalError):
        return DatabaseError("database unreachable or busy", operation)
    return DatabaseError("unexpected database failure", operation)


@asynccontextmanager
async def unit_of_work(db: AsyncSession, operation: str) -> AsyncGenerator[None, None]:
    """Commit everything flushed in the body, or roll all of it back."""
    try:
        yield
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        error = map_sqlalchemy_error(e, operation)
        logger.error(
            f"{error.message}: {e}",
            extra={"error_code": error.code, "operation": operation},
        )
        raise error from e
    except Exception:
        await db.rollback()
        logger.warning(
            f"Unit of work rolled back ({operation})",
            extra={"operation": operation},
        )
        raise


class DatabaseSessionManager:
    """Owns the engine and hands out request sessions."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_options: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_options.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_options)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Request session. Anything left uncommitted is rolled back on close."""
        async with self._session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                raise map_sqlalchemy_error(e, "request") from e

    async def health_check(self) -> bool:
        """Check database connectivity for the readiness route."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except (DatabaseError, OSError) as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
