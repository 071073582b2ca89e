"""Portfolio ORM — one portfolio entry; exactly one row is main once any exist.

Invariants:
    - id is an auto-increment integer assigned on insert, never reassigned
    - main_state is written only by the portfolio service (create and set-main)
    - At most one row has main_state = true (partial unique index)
    - updated_at is None until the first update, then refreshed on every update

Design Decisions:
    - Partial unique index over a trigger: the store itself rejects a second
      main row even if a writer bypasses the invariant guard
    - Text for content: up to 100,000 chars, beyond portable VARCHAR limits
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Portfolio(Base):
    """Portfolio entity — a titled document rendered by the site."""
    __tablename__ = "portfolios"
    __table_args__ = (
        Index(
            "uq_portfolios_single_main", "main_state", unique=True,
            postgresql_where=text("main_state"),
            sqlite_where=text("main_state"),
        ),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(150), nullable=False)
    content_format: Mapped[str] = mapped_column(String(10), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    main_state: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, onupdate=_utcnow,
    )
