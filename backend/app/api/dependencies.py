"""Service Dependencies — wires repositories into services per request.

Invariants:
    - One AsyncSession per request (get_db); both repository and guard use it
    - Services receive repositories, never sessions (core stays IO-agnostic)

Design Decisions:
    - Plain Depends() chain over a DI container: tests override get_db and
      get_invariant_locks only, everything above them is rebuilt per request
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.career_repository import SqlCareerRepository
from app.infrastructure.database import get_db
from app.infrastructure.education_repository import SqlEducationRepository
from app.infrastructure.invariant_locks import InvariantLocks, get_invariant_locks
from app.infrastructure.personal_information_repository import (
    SqlPersonalInformationRepository,
)
from app.infrastructure.portfolio_repository import SqlPortfolioRepository
from app.services.personal_information_service import PersonalInformationService
from app.services.portfolio_service import PortfolioService
from app.services.timeline_service import TimelineService


def get_portfolio_service(
    db: AsyncSession = Depends(get_db),
    locks: InvariantLocks = Depends(get_invariant_locks),
) -> PortfolioService:
    return PortfolioService(SqlPortfolioRepository(db, locks))


def get_personal_information_service(
    db: AsyncSession = Depends(get_db),
    locks: InvariantLocks = Depends(get_invariant_locks),
) -> PersonalInformationService:
    return PersonalInformationService(SqlPersonalInformationRepository(db, locks))


def get_career_service(db: AsyncSession = Depends(get_db)) -> TimelineService:
    return TimelineService(SqlCareerRepository(db), "Career")


def get_education_service(db: AsyncSession = Depends(get_db)) -> TimelineService:
    return TimelineService(SqlEducationRepository(db), "Education")
