"""Alembic environment — online async migrations against the configured database.

Design Decisions:
    - URL taken from app.config Settings, the same value the API connects with
      (DATABASE_URL; postgresql:// already normalized to postgresql+asyncpg://)
    - Online mode only: migrations always run against a live database
    - `import app.models` registers every table on Base.metadata for autogenerate
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

import app.models  # noqa: F401
from app.config import get_settings
from app.db.base import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)


def _migrate(connection: Connection) -> None:
    context.configure(
        connection=connection, target_metadata=Base.metadata, compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


async def _run_migrations() -> None:
    engine = create_async_engine(get_settings().database_url, poolclass=pool.NullPool)
    async with engine.connect() as connection:
        await connection.run_sync(_migrate)
    await engine.dispose()


if context.is_offline_mode():
    raise RuntimeError("Offline (--sql) migrations are not supported")

asyncio.run(_run_migrations())
