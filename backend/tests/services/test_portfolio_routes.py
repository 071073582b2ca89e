"""Portfolio Routes — HTTP behaviour against an async SQLite database.

Tests cover:
    - Success envelope shape and status codes (201 create, 200 otherwise)
    - First portfolio is main; the main portfolio cannot be deleted (400)
    - main-state PATCH moves the designation; missing id is 404 with no writes
    - Validation errors (400) for bad bodies, ids and query params
    - Paging: defaults, explicit size, case-insensitive order_by, clamped current_page
"""

import pytest

BASE = "/api/v1/portfolios"


def _body(title: str = "Resume", **overrides) -> dict:
    body = {"title": title, "content_format": "HTML", "content": "<p>hello world</p>"}
    body.update(overrides)
    return body


async def _create(client, title: str = "Resume") -> dict:
    response = await client.post(BASE, json=_body(title))
    assert response.status_code == 201
    return response.json()["data"]


# ─── create ──────────────────────────────────────────────────────

async def test_create_returns_envelope_with_main_flag(client):
    response = await client.post(BASE, json=_body())

    assert response.status_code == 201
    body = response.json()
    assert body["statusCode"] == 201
    assert body["message"]
    assert body["data"]["main_state"] is True
    assert body["data"]["id"] >= 1


async def test_second_create_is_not_main(client):
    await _create(client, "First")
    second = await _create(client, "Second")
    assert second["main_state"] is False


async def test_create_ignores_client_main_state(client):
    await _create(client, "First")
    response = await client.post(BASE, json=_body("Second", main_state=True))

    assert response.status_code == 201
    assert response.json()["data"]["main_state"] is False


@pytest.mark.parametrize("overrides", [
    {"title": ""},
    {"title": "   "},
    {"title": "x" * 151},
    {"content_format": "MD"},
    {"content_format": " MD  "},
    {"content": "short"},
])
async def test_create_with_invalid_body_returns_400(client, overrides):
    response = await client.post(BASE, json=_body(**overrides))

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"]


# ─── read ────────────────────────────────────────────────────────

async def test_get_detail_includes_content(client):
    created = await _create(client)

    response = await client.get(f"{BASE}/{created['id']}")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["content"] == "<p>hello world</p>"
    assert data["main_state"] is True
    assert data["updated_at"] is None


async def test_get_missing_portfolio_returns_404(client):
    response = await client.get(f"{BASE}/999")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_get_non_positive_id_returns_400(client):
    response = await client.get(f"{BASE}/0")
    assert response.status_code == 400


async def test_get_main_on_empty_store_returns_404(client):
    response = await client.get(f"{BASE}/main")
    assert response.status_code == 404


async def test_get_main_returns_first_created(client):
    first = await _create(client, "First")
    await _create(client, "Second")

    response = await client.get(f"{BASE}/main")

    assert response.status_code == 200
    assert response.json()["data"]["id"] == first["id"]


# ─── update ──────────────────────────────────────────────────────

async def test_update_changes_fields_but_not_main(client):
    created = await _create(client)

    response = await client.patch(
        f"{BASE}/{created['id']}", json={"title": "Renamed", "main_state": False},
    )

    assert response.status_code == 200
    assert response.json()["data"]["id"] == created["id"]
    detail = (await client.get(f"{BASE}/{created['id']}")).json()["data"]
    assert detail["title"] == "Renamed"
    assert detail["main_state"] is True
    assert detail["updated_at"] is not None


async def test_update_with_empty_body_returns_400(client):
    created = await _create(client)
    response = await client.patch(f"{BASE}/{created['id']}", json={})
    assert response.status_code == 400


async def test_update_missing_portfolio_returns_404(client):
    response = await client.patch(f"{BASE}/42", json={"title": "New"})
    assert response.status_code == 404


# ─── main-state ──────────────────────────────────────────────────

async def test_set_main_moves_designation(client):
    first = await _create(client, "First")
    second = await _create(client, "Second")

    response = await client.patch(f"{BASE}/{second['id']}/main-state")

    assert response.status_code == 200
    assert response.json()["data"] == {"id": second["id"], "main_state": True}
    main = (await client.get(f"{BASE}/main")).json()["data"]
    assert main["id"] == second["id"]
    old = (await client.get(f"{BASE}/{first['id']}")).json()["data"]
    assert old["main_state"] is False


async def test_set_main_missing_target_keeps_previous_main(client):
    first = await _create(client, "First")

    response = await client.patch(f"{BASE}/999/main-state")

    assert response.status_code == 404
    main = (await client.get(f"{BASE}/main")).json()["data"]
    assert main["id"] == first["id"]


# ─── delete ──────────────────────────────────────────────────────

async def test_delete_main_returns_400_and_keeps_row(client):
    created = await _create(client)

    response = await client.delete(f"{BASE}/{created['id']}")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "MAIN_PORTFOLIO_UNDELETABLE"
    assert (await client.get(f"{BASE}/{created['id']}")).status_code == 200


async def test_delete_non_main_succeeds(client):
    await _create(client, "First")
    second = await _create(client, "Second")

    response = await client.delete(f"{BASE}/{second['id']}")

    assert response.status_code == 200
    assert response.json()["data"] == {"id": second["id"]}
    assert (await client.get(f"{BASE}/{second['id']}")).status_code == 404


async def test_delete_missing_portfolio_returns_404(client):
    response = await client.delete(f"{BASE}/999")
    assert response.status_code == 404


# ─── listing ─────────────────────────────────────────────────────

async def test_list_empty_store_has_one_page(client):
    response = await client.get(BASE)

    assert response.status_code == 200
    page = response.json()["data"]
    assert page["data"] == []
    assert page["total_count"] == 0
    assert page["total_page"] == 1
    assert page["current_page"] == 1
    assert page["per_page_size"] == 10


async def test_list_defaults_to_newest_first(client):
    for title in ("A", "B", "C"):
        await _create(client, title)

    page = (await client.get(BASE)).json()["data"]

    assert [p["title"] for p in page["data"]] == ["C", "B", "A"]
    assert "content" not in page["data"][0]


async def test_list_order_by_is_case_insensitive(client):
    for title in ("A", "B", "C"):
        await _create(client, title)

    page = (await client.get(BASE, params={"order_by": "asc"})).json()["data"]

    assert [p["title"] for p in page["data"]] == ["A", "B", "C"]


async def test_list_paginates(client):
    for i in range(5):
        await _create(client, f"T{i}")

    page = (await client.get(
        BASE, params={"page_number": 3, "per_page_size": 2, "order_by": "ASC"},
    )).json()["data"]

    assert [p["title"] for p in page["data"]] == ["T4"]
    assert page["total_page"] == 3
    assert page["current_page"] == 3


async def test_list_past_last_page_clamps_current_page(client):
    await _create(client)

    page = (await client.get(BASE, params={"page_number": 5})).json()["data"]

    assert page["data"] == []
    assert page["current_page"] == 1


@pytest.mark.parametrize("params", [
    {"page_number": 0},
    {"per_page_size": 0},
    {"order_by": "sideways"},
])
async def test_list_rejects_bad_query(client, params):
    response = await client.get(BASE, params=params)
    assert response.status_code == 400
