"""Personal Information Schemas — validation for the owner profile record.

Invariants:
    - name 1-50, address 1-100, email <= 100 and address-shaped, contact <= 20
    - birth_date is a calendar date not in the future
    - contact matches a dashed or undashed phone number: 010-1234-5678, 02-123-4567
    - gender is one of Gender (male | female)
"""

import re
from datetime import date

from pydantic import BaseModel, Field, field_validator, model_validator

from app.core.domain_types import Gender

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
CONTACT_PATTERN = re.compile(r"^(01[016789]|02|0[3-9][0-9])-?[0-9]{3,4}-?[0-9]{4}$")


def _check_birth_date(value: date) -> date:
    if value > date.today():
        raise ValueError("birth_date cannot be in the future")
    return value


def _check_contact(value: str) -> str:
    if not CONTACT_PATTERN.match(value):
        raise ValueError("contact must be a phone number such as 010-1234-5678")
    return value


class PersonalInformationCreate(BaseModel):
    """Personal information creation — every field required."""
    name: str = Field(min_length=1, max_length=50)
    birth_date: date
    gender: Gender
    address: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=100, pattern=EMAIL_PATTERN)
    contact: str = Field(min_length=1, max_length=20)

    @field_validator("birth_date")
    @classmethod
    def birth_date_not_future(cls, v: date) -> date:
        return _check_birth_date(v)

    @field_validator("contact")
    @classmethod
    def contact_is_phone(cls, v: str) -> str:
        return _check_contact(v)


class PersonalInformationUpdate(BaseModel):
    """Personal information update — any subset of fields."""
    name: str | None = Field(None, min_length=1, max_length=50)
    birth_date: date | None = None
    gender: Gender | None = None
    address: str | None = Field(None, min_length=1, max_length=100)
    email: str | None = Field(None, max_length=100, pattern=EMAIL_PATTERN)
    contact: str | None = Field(None, min_length=1, max_length=20)

    @field_validator("birth_date")
    @classmethod
    def birth_date_not_future(cls, v: date | None) -> date | None:
        return v if v is None else _check_birth_date(v)

    @field_validator("contact")
    @classmethod
    def contact_is_phone(cls, v: str | None) -> str | None:
        return v if v is None else _check_contact(v)

    @model_validator(mode="after")
    def require_any_field(self):
        if not self.model_dump(exclude_none=True):
            raise ValueError("update requires at least one field")
        return self
