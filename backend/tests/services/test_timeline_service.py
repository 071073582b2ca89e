"""Timeline Service — career/education lifecycle over an in-memory store.

Tests cover:
    - create stores the entry; inverted period rejected before any write
    - update checks the merged period and rolls back on failure
    - update/delete of a missing entry raise not-found carrying the id
    - list_entries orders by start_date
"""

import logging
from datetime import date

import pytest

from app.core.errors import InvalidPeriodError, PersistenceError, ResourceNotFoundError


def _fields(**overrides) -> dict:
    fields = {
        "company_name": "Acme",
        "position": "Backend Engineer",
        "start_date": date(2020, 3, 1),
        "end_date": date(2022, 8, 31),
    }
    fields.update(overrides)
    return fields


# ─── create ──────────────────────────────────────────────────────

async def test_create_stores_entry(career_service, timeline_repo):
    entry_id = await career_service.create(_fields())

    assert entry_id == 1
    assert timeline_repo.rows[1]["company_name"] == "Acme"
    assert timeline_repo.transactions == 1


async def test_create_with_inverted_period_writes_nothing(career_service, timeline_repo, caplog):
    with caplog.at_level(logging.WARNING, logger="app.services.timeline_service"):
        with pytest.raises(InvalidPeriodError):
            await career_service.create(_fields(end_date=date(2019, 1, 1)))

    assert timeline_repo.rows == {}
    assert timeline_repo.transactions == 0
    assert [r for r in caplog.records if r.name == "app.services.timeline_service"][-1].error_code == "INVALID_PERIOD"


async def test_create_with_unusable_id_rolls_back(career_service, timeline_repo):
    timeline_repo.save_result = 0

    with pytest.raises(PersistenceError):
        await career_service.create(_fields())

    assert timeline_repo.rows == {}


# ─── update ──────────────────────────────────────────────────────

async def test_update_merges_supplied_fields(career_service, timeline_repo):
    entry_id = await career_service.create(_fields())

    await career_service.update(entry_id, {"position": "Lead"})

    row = timeline_repo.rows[entry_id]
    assert row["position"] == "Lead"
    assert row["company_name"] == "Acme"
    assert row["updated_at"] is not None


async def test_update_can_clear_end_date(career_service, timeline_repo):
    entry_id = await career_service.create(_fields())

    await career_service.update(entry_id, {"end_date": None})

    assert timeline_repo.rows[entry_id]["end_date"] is None


async def test_update_moving_start_past_stored_end_is_rejected(career_service, timeline_repo):
    entry_id = await career_service.create(_fields())

    with pytest.raises(InvalidPeriodError) as exc_info:
        await career_service.update(entry_id, {"start_date": date(2023, 1, 1)})

    assert exc_info.value.context.resource_id == entry_id
    assert timeline_repo.rows[entry_id]["start_date"] == date(2020, 3, 1)


async def test_update_missing_entry_is_not_found(career_service):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await career_service.update(9, {"position": "Lead"})

    assert exc_info.value.message == "Career '9' not found"
    assert exc_info.value.context.resource_id == 9


# ─── delete / list ───────────────────────────────────────────────

async def test_delete_removes_entry(career_service, timeline_repo):
    entry_id = await career_service.create(_fields())

    assert await career_service.delete(entry_id) == entry_id
    assert timeline_repo.rows == {}


async def test_delete_missing_entry_is_not_found(career_service):
    with pytest.raises(ResourceNotFoundError):
        await career_service.delete(4)


async def test_list_entries_orders_by_start_date(career_service):
    await career_service.create(_fields(company_name="Later", start_date=date(2021, 1, 1), end_date=None))
    await career_service.create(_fields(company_name="Earlier", start_date=date(2015, 1, 1), end_date=None))

    entries = await career_service.list_entries()

    assert [e["company_name"] for e in entries] == ["Earlier", "Later"]
