"""Career Schemas — validation for employment history entries.

Invariants:
    - company_name and position: 1-100 chars, stripped before the length check
    - end_date optional (ongoing); when both dates are given, end_date >= start_date
    - CareerUpdate: any subset of fields, at least one; only end_date may be null
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator, model_validator

from app.schemas.timeline import reject_null_required, strip_text, validate_period


class CareerCreate(BaseModel):
    """Career creation: end_date omitted while the position is current."""
    company_name: str = Field(min_length=1, max_length=100)
    position: str = Field(min_length=1, max_length=100)
    start_date: date
    end_date: date | None = None

    @field_validator("company_name", "position", mode="before")
    @classmethod
    def strip_names(cls, v: object) -> object:
        return strip_text(v)

    @model_validator(mode="after")
    def check_period(self):
        validate_period(self.start_date, self.end_date)
        return self


class CareerUpdate(BaseModel):
    """Career update: send end_date: null to mark the position current again."""
    company_name: str | None = Field(None, min_length=1, max_length=100)
    position: str | None = Field(None, min_length=1, max_length=100)
    start_date: date | None = None
    end_date: date | None = None

    @field_validator("company_name", "position", mode="before")
    @classmethod
    def strip_names(cls, v: object) -> object:
        return strip_text(v)

    @model_validator(mode="after")
    def check_fields(self):
        reject_null_required(self, ("company_name", "position", "start_date"))
        if self.start_date is not None:
            validate_period(self.start_date, self.end_date)
        return self
