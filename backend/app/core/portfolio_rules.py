"""Portfolio Rules — pure decisions behind the single-main-portfolio invariant.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Check functions return an error on violation, None on success
    - Content changes never carry main_state: only the invariant manager
      writes the main flag, and only through plan_main_reassignment

Design Decisions:
    - Pure functions over service methods: every branch of the invariant is
      testable without a repository or event loop
    - Errors returned, not raised: the service decides when to raise, so a
      check can also be used as a predicate
"""

from datetime import datetime

from app.core.domain_types import PortfolioId
from app.core.errors import FolioError, MainPortfolioDeletionError

CONTENT_FIELDS = ("title", "content_format", "content")


def is_usable_id(value: object) -> bool:
    """A store-assigned ID is usable only if it is a positive integer."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def resolve_initial_main_state(existing_count: int) -> bool:
    """The first portfolio ever stored becomes main; later ones never do."""
    return existing_count == 0


def build_new_portfolio(
    title: str, content_format: str, content: str, existing_count: int,
) -> dict:
    """Build the record to persist on create. main_state is computed, never supplied."""
    return {
        "title": title,
        "content_format": content_format,
        "content": content,
        "main_state": resolve_initial_main_state(existing_count),
    }


def extract_content_changes(fields: dict) -> dict:
    """Keep only supplied content fields. Drops main_state and anything unknown."""
    return {
        key: fields[key]
        for key in CONTENT_FIELDS
        if key in fields and fields[key] is not None
    }


def check_deletable(portfolio: dict) -> FolioError | None:
    """Main portfolio is protected: delete is rejected, not cascaded."""
    if portfolio["main_state"]:
        return MainPortfolioDeletionError(portfolio["id"])
    return None


def plan_main_reassignment(
    current_mains: list[dict], target_id: PortfolioId,
) -> list[PortfolioId]:
    """IDs whose main flag must be cleared before target becomes main.

    Treats current_mains as a set: every flagged row other than the target
    is cleared, which also repairs a store that already holds several mains.
    """
    return sorted(
        {p["id"] for p in current_mains if p["id"] != target_id},
    )


def _creation_key(portfolio: dict) -> tuple[datetime, int]:
    return (portfolio["created_at"], portfolio["id"])


def select_main(mains: list[dict]) -> dict | None:
    """Pick the main portfolio from all main-flagged rows.

    Earliest created wins (then lowest id), so the choice is stable when the
    store holds more than one flagged row.
    """
    if not mains:
        return None
    return min(mains, key=_creation_key)
