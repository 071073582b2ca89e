"""PersonalInformation ORM — the site owner's profile record.

Invariants:
    - At most one row ever exists (enforced by the service under a singleton guard)
    - Rows are created once, updated in place, never deleted

Design Decisions:
    - gender stored as a non-native enum (VARCHAR): portable across
      PostgreSQL and SQLite without a CREATE TYPE migration
"""

from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import Gender
from app.db.base import Base


class PersonalInformation(Base):
    """Personal information entity — name, birth date and contact details."""
    __tablename__ = "personal_information"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    gender: Mapped[Gender] = mapped_column(
        Enum(
            Gender, name="personal_information_gender", native_enum=False,
            length=10, values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
    )
    address: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    contact: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        onupdate=lambda: datetime.now(timezone.utc),
    )
