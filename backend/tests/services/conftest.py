"""Service test fixtures — in-memory fakes, async SQLite DB and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database and fresh fakes
    - get_db and get_invariant_locks overridden; lifespan is not run by ASGITransport
    - db_manager and the invariant_locks singleton patched so readiness sees the test setup

Design Decisions:
    - SQLite in-memory: fast, no external dependency; the partial unique index
      is enforced by SQLite too, so single-main tests exercise the real constraint
    - Fake repositories for service tests: invariant logic is tested without SQL
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.models import Career, Education, PersonalInformation, Portfolio  # noqa: F401
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.infrastructure.invariant_locks import InvariantLocks, get_invariant_locks
from app.services.personal_information_service import PersonalInformationService
from app.services.portfolio_service import PortfolioService
from app.services.timeline_service import TimelineService
import app.infrastructure.database as db_module
import app.infrastructure.invariant_locks as locks_module
from app.main import app
from tests.services.fake_repositories import (
    FakePersonalInformationRepository, FakePortfolioRepository, FakeTimelineRepository,
)


# ─── Fakes ───────────────────────────────────────────────────────

@pytest.fixture
def portfolio_repo():
    return FakePortfolioRepository()


@pytest.fixture
def portfolio_service(portfolio_repo):
    return PortfolioService(portfolio_repo)


@pytest.fixture
def personal_repo():
    return FakePersonalInformationRepository()


@pytest.fixture
def personal_service(personal_repo):
    return PersonalInformationService(personal_repo)


@pytest.fixture
def timeline_repo():
    return FakeTimelineRepository()


@pytest.fixture
def career_service(timeline_repo):
    return TimelineService(timeline_repo, "Career")


# ─── SQLite ──────────────────────────────────────────────────────

@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def locks():
    return InvariantLocks()


@pytest.fixture
async def client(test_engine, test_session_factory, locks):
    """FastAPI test client with DB and lock dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_invariant_locks] = lambda: locks

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager
    original_locks = locks_module.invariant_locks
    locks_module.invariant_locks = locks

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
    locks_module.invariant_locks = original_locks
