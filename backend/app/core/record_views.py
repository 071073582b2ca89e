"""Record Views — plain mapping from repository records to response payloads.

Invariants:
    - Pure field copies; no lookups, no defaults invented
    - Timestamps rendered as ISO 8601; updated_at stays None until the first update
    - Summaries omit content (listing pages stay small; content can be 100k chars)
"""

from datetime import date, datetime


def _iso(value: date | datetime | None) -> str | None:
    return value.isoformat() if value else None


def portfolio_summary(portfolio: dict) -> dict:
    """List item view."""
    return {
        "id": portfolio["id"],
        "title": portfolio["title"],
        "content_format": portfolio["content_format"],
        "main_state": portfolio["main_state"],
        "created_at": _iso(portfolio["created_at"]),
        "updated_at": _iso(portfolio.get("updated_at")),
    }


def portfolio_detail(portfolio: dict) -> dict:
    """Detail view — summary plus content."""
    return {**portfolio_summary(portfolio), "content": portfolio["content"]}


def personal_information_view(record: dict) -> dict:
    gender = record["gender"]
    return {
        "id": record["id"],
        "name": record["name"],
        "birth_date": _iso(record["birth_date"]),
        "gender": getattr(gender, "value", gender),
        "address": record["address"],
        "email": record["email"],
        "contact": record["contact"],
        "created_at": _iso(record["created_at"]),
        "updated_at": _iso(record.get("updated_at")),
    }


def timeline_entry_view(entry: dict) -> dict:
    """Career or education item: every column copied, dates and timestamps as ISO."""
    return {
        key: _iso(value) if isinstance(value, (date, datetime)) else value
        for key, value in entry.items()
    }
