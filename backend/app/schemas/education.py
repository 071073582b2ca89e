"""Education Schemas — validation for school history entries.

Invariants:
    - school_name and major: 1-100 chars, stripped before the length check
    - degree optional, at most 200 chars; blank is treated as absent
    - end_date optional (still studying); when both dates are given, end_date >= start_date
    - EducationUpdate: any subset of fields, at least one; degree and end_date may be null
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator, model_validator

from app.schemas.timeline import reject_null_required, strip_text, validate_period


def _blank_to_none(value: object) -> object:
    value = strip_text(value)
    return None if value == "" else value


class EducationCreate(BaseModel):
    """Education creation."""
    school_name: str = Field(min_length=1, max_length=100)
    major: str = Field(min_length=1, max_length=100)
    degree: str | None = Field(None, max_length=200)
    start_date: date
    end_date: date | None = None

    @field_validator("school_name", "major", mode="before")
    @classmethod
    def strip_names(cls, v: object) -> object:
        return strip_text(v)

    @field_validator("degree", mode="before")
    @classmethod
    def blank_degree_is_none(cls, v: object) -> object:
        return _blank_to_none(v)

    @model_validator(mode="after")
    def check_period(self):
        validate_period(self.start_date, self.end_date)
        return self


class EducationUpdate(BaseModel):
    """Education update: any subset of fields."""
    school_name: str | None = Field(None, min_length=1, max_length=100)
    major: str | None = Field(None, min_length=1, max_length=100)
    degree: str | None = Field(None, max_length=200)
    start_date: date | None = None
    end_date: date | None = None

    @field_validator("school_name", "major", mode="before")
    @classmethod
    def strip_names(cls, v: object) -> object:
        return strip_text(v)

    @field_validator("degree", mode="before")
    @classmethod
    def blank_degree_is_none(cls, v: object) -> object:
        return _blank_to_none(v)

    @model_validator(mode="after")
    def check_fields(self):
        reject_null_required(self, ("school_name", "major", "start_date"))
        if self.start_date is not None:
            validate_period(self.start_date, self.end_date)
        return self
