"""Portfolio Rules — pure decisions behind the single-main invariant.

Tests cover:
    - is_usable_id: positive ints only (bool, zero, negatives, None rejected)
    - Initial main state from the existing count
    - Content change extraction never carries main_state
    - check_deletable, plan_main_reassignment, select_main
"""

from datetime import datetime, timezone

import pytest

from app.core.errors import MainPortfolioDeletionError
from app.core.portfolio_rules import (
    build_new_portfolio,
    check_deletable,
    extract_content_changes,
    is_usable_id,
    plan_main_reassignment,
    resolve_initial_main_state,
    select_main,
)


def _row(portfolio_id: int, minute: int = 0, main_state: bool = True) -> dict:
    return {
        "id": portfolio_id,
        "main_state": main_state,
        "created_at": datetime(2026, 1, 1, 0, minute, tzinfo=timezone.utc),
    }


@pytest.mark.parametrize("value,expected", [
    (1, True),
    (42, True),
    (0, False),
    (-1, False),
    (None, False),
    (True, False),
    ("3", False),
])
def test_is_usable_id(value, expected):
    assert is_usable_id(value) is expected


def test_initial_main_state_only_for_empty_store():
    assert resolve_initial_main_state(0) is True
    assert resolve_initial_main_state(1) is False
    assert resolve_initial_main_state(7) is False


def test_build_new_portfolio_computes_main_state():
    record = build_new_portfolio("T", "HTML", "0123456789", existing_count=3)
    assert record == {
        "title": "T",
        "content_format": "HTML",
        "content": "0123456789",
        "main_state": False,
    }


def test_extract_content_changes_drops_main_state_and_none():
    changes = extract_content_changes({
        "title": "New",
        "content_format": None,
        "main_state": True,
        "id": 9,
    })
    assert changes == {"title": "New"}


def test_check_deletable():
    assert check_deletable(_row(1, main_state=False)) is None
    error = check_deletable(_row(1, main_state=True))
    assert isinstance(error, MainPortfolioDeletionError)
    assert error.context.resource_id == 1


def test_plan_main_reassignment_excludes_target():
    mains = [_row(3), _row(1), _row(5)]
    assert plan_main_reassignment(mains, 3) == [1, 5]


def test_plan_main_reassignment_with_no_mains():
    assert plan_main_reassignment([], 4) == []


def test_select_main_picks_earliest_created():
    assert select_main([_row(9, minute=1), _row(4, minute=2)])["id"] == 9


def test_select_main_breaks_ties_by_id():
    assert select_main([_row(7), _row(2)])["id"] == 2


def test_select_main_empty_is_none():
    assert select_main([]) is None
