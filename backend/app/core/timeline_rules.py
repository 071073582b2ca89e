"""Timeline Rules — pure checks for dated history entries (career, education).

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - An entry's period is valid when end_date is absent (ongoing) or not
      before start_date
    - The period is checked on the MERGED record, so a partial update cannot
      move one bound past the stored other bound

Design Decisions:
    - Same contract as portfolio_rules: checks return an error or None
"""

from datetime import date

from app.core.errors import ErrorContext, FolioError, InvalidPeriodError


def check_period(
    start_date: date, end_date: date | None, entry_id: int | None = None,
) -> FolioError | None:
    if end_date is not None and end_date < start_date:
        return InvalidPeriodError(
            start_date, end_date, ErrorContext(resource_id=entry_id),
        )
    return None


def merged_period(entry: dict, changes: dict) -> tuple[date, date | None]:
    """The (start_date, end_date) the entry will have once changes are applied."""
    return (
        changes.get("start_date", entry["start_date"]),
        changes.get("end_date", entry["end_date"]),
    )
