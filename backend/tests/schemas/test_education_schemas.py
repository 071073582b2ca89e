"""Education Schemas — request validation for school history.

Tests cover:
    - degree optional, blank treated as absent, 200 char limit
    - end_date before start_date rejected
    - Update: degree and end_date may be cleared, required columns may not
"""

import pytest
from pydantic import ValidationError

from app.schemas.education import EducationCreate, EducationUpdate


def _body(**overrides) -> dict:
    body = {
        "school_name": "Seoul National University",
        "major": "Computer Science",
        "degree": "B.S.",
        "start_date": "2012-03-01",
        "end_date": "2016-02-28",
    }
    body.update(overrides)
    return body


def test_create_keeps_degree():
    assert EducationCreate(**_body()).degree == "B.S."


@pytest.mark.parametrize("degree", ["", "   ", None])
def test_create_blank_degree_is_none(degree):
    assert EducationCreate(**_body(degree=degree)).degree is None


@pytest.mark.parametrize("overrides", [
    {"school_name": ""},
    {"major": "m" * 101},
    {"degree": "d" * 201},
    {"end_date": "2011-12-31"},
])
def test_create_rejects_invalid_body(overrides):
    with pytest.raises(ValidationError):
        EducationCreate(**_body(**overrides))


def test_update_can_clear_degree_and_end_date():
    model = EducationUpdate(degree=None, end_date=None)
    assert model.model_dump(exclude_unset=True) == {"degree": None, "end_date": None}


def test_update_blank_degree_clears_it():
    assert EducationUpdate(degree="  ").model_dump(exclude_unset=True) == {"degree": None}


@pytest.mark.parametrize("field", ["school_name", "major", "start_date"])
def test_update_rejects_null_required_column(field):
    with pytest.raises(ValidationError):
        EducationUpdate(**{field: None})


def test_update_rejects_empty_body():
    with pytest.raises(ValidationError):
        EducationUpdate()
