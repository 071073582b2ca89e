"""Timeline Schema Helpers — shared validators for career and education bodies.

Invariants:
    - strip_text runs as a mode="before" validator, so Field length limits
      apply to the stripped value
    - Updates distinguish "not sent" from "sent as null" via model_fields_set
"""

from datetime import date

from pydantic import BaseModel


def strip_text(value: object) -> object:
    return value.strip() if isinstance(value, str) else value


def validate_period(start_date: date, end_date: date | None) -> None:
    if end_date is not None and end_date < start_date:
        raise ValueError("end_date cannot be before start_date")


def reject_null_required(model: BaseModel, required: tuple[str, ...]) -> None:
    """An update must send at least one field, and never null for a required column."""
    if not model.model_fields_set:
        raise ValueError("update requires at least one field")
    nulled = sorted(
        name for name in required
        if name in model.model_fields_set and getattr(model, name) is None
    )
    if nulled:
        raise ValueError(f"{', '.join(nulled)} cannot be null")
