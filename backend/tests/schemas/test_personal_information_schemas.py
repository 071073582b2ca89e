"""Personal information schemas — owner profile validation.

Invariants:
    - email must look like an address; contact must be a phone number
    - birth_date cannot be in the future
    - gender limited to male | female
    - update requires at least one field
"""

from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from app.core.domain_types import Gender
from app.schemas.personal_information import (
    PersonalInformationCreate, PersonalInformationUpdate,
)


def _create(**overrides) -> dict:
    body = {
        "name": "Hong Gildong",
        "birth_date": "1990-05-17",
        "gender": "male",
        "address": "Seoul",
        "email": "hong@example.com",
        "contact": "010-1234-5678",
    }
    body.update(overrides)
    return body


# --- PersonalInformationCreate ------------------------------------------------

def test_create_parses_types():
    model = PersonalInformationCreate(**_create())
    assert model.birth_date == date(1990, 5, 17)
    assert model.gender is Gender.MALE


@pytest.mark.parametrize("contact", ["010-1234-5678", "01012345678", "02-123-4567", "031-123-4567"])
def test_create_accepts_phone_formats(contact):
    assert PersonalInformationCreate(**_create(contact=contact)).contact == contact


@pytest.mark.parametrize("contact", ["12345", "010-12-5678", "phone"])
def test_create_rejects_bad_contact(contact):
    with pytest.raises(ValidationError):
        PersonalInformationCreate(**_create(contact=contact))


@pytest.mark.parametrize("email", ["hong", "hong@", "hong@example", "a b@example.com"])
def test_create_rejects_bad_email(email):
    with pytest.raises(ValidationError):
        PersonalInformationCreate(**_create(email=email))


def test_create_rejects_future_birth_date():
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    with pytest.raises(ValidationError):
        PersonalInformationCreate(**_create(birth_date=tomorrow))


def test_create_rejects_unknown_gender():
    with pytest.raises(ValidationError):
        PersonalInformationCreate(**_create(gender="other"))


def test_create_rejects_long_name():
    with pytest.raises(ValidationError):
        PersonalInformationCreate(**_create(name="x" * 51))


# --- PersonalInformationUpdate ------------------------------------------------

def test_update_accepts_single_field():
    model = PersonalInformationUpdate(address="Busan")
    assert model.model_dump(exclude_none=True) == {"address": "Busan"}


def test_update_requires_some_field():
    with pytest.raises(ValidationError):
        PersonalInformationUpdate()


def test_update_validates_supplied_contact():
    with pytest.raises(ValidationError):
        PersonalInformationUpdate(contact="nope")
