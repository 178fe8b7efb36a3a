"""User routes: listing, lookup, create, update echo and delete over HTTP.

Invariants:
    - Pagination data length and total_pages follow the documented formulas
    - Create -> /all includes the new record with id previous max + 1
    - PUT never changes what GET returns afterwards
    - DELETE takes its id from the JSON body
"""

import math

import pytest

SUPPORT = {"url": "https://example.com/support", "text": "Demo API for testing tooling"}


async def _create(client, name="Ada Lovelace", job="Engineer"):
    return await client.post("/api/users", json={"name": name, "job": job})


# ─── GET /api/users ──────────────────────────────────────────────

async def test_list_defaults_to_first_page_of_two(client):
    res = await client.get("/api/users")
    assert res.status_code == 200
    body = res.json()
    assert body["page"] == 1
    assert body["per_page"] == 2
    assert body["total"] == 2
    assert body["total_pages"] == 1
    assert [u["id"] for u in body["data"]] == [1, 2]
    assert body["support"] == SUPPORT


async def test_list_renders_integral_values_as_ints(client):
    res = await client.get("/api/users", params={"page": "1.0", "per_page": "2"})
    assert '"page":1,' in res.text
    assert '"per_page":2,' in res.text


@pytest.mark.parametrize("page", [1, 2, 3, 4])
@pytest.mark.parametrize("per_page", [1, 2, 3])
async def test_list_pagination_formulas(client, page, per_page):
    for i in range(3):
        await _create(client, name=f"User Number{i}")
    total = 5

    res = await client.get(
        "/api/users", params={"page": str(page), "per_page": str(per_page)},
    )
    body = res.json()
    assert res.status_code == 200
    assert len(body["data"]) == min(per_page, max(0, total - (page - 1) * per_page))
    assert body["total_pages"] == max(1, math.ceil(total / per_page))


async def test_list_huge_finite_values_give_empty_page(client):
    res = await client.get(
        "/api/users", params={"page": "1e308", "per_page": "1e308"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["data"] == []
    assert body["total"] == 2
    assert body["total_pages"] == 1


async def test_list_second_page(client):
    await _create(client)
    res = await client.get("/api/users", params={"page": "2", "per_page": "2"})
    body = res.json()
    assert [u["id"] for u in body["data"]] == [3]
    assert body["total_pages"] == 2


@pytest.mark.parametrize("params", [
    {"page": "0"},
    {"per_page": "-1"},
    {"page": "abc"},
    {"per_page": "two"},
    {"page": ""},
    {"page": "Infinity"},
    {"page": "NaN"},
])
async def test_list_invalid_pagination(client, params):
    res = await client.get("/api/users", params=params)
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid pagination parameters"}


# ─── GET /api/users/all ──────────────────────────────────────────

async def test_list_all(client):
    res = await client.get("/api/users/all")
    assert res.status_code == 200
    body = res.json()
    assert body["total"] == 2
    assert body["data"][0] == {
        "id": 1,
        "email": "janet.weaver@example.com",
        "first_name": "Janet",
        "last_name": "Weaver",
        "job": "QA Engineer",
    }
    assert set(body) == {"total", "data"}


# ─── GET /api/users/{id} ─────────────────────────────────────────

async def test_get_user(client):
    res = await client.get("/api/users/2")
    assert res.status_code == 200
    body = res.json()
    assert body["data"]["email"] == "emma.wong@example.com"
    assert body["support"] == SUPPORT


async def test_get_user_accepts_integral_float_id(client):
    res = await client.get("/api/users/2.0")
    assert res.status_code == 200
    assert res.json()["data"]["id"] == 2


@pytest.mark.parametrize("user_id", ["99", "abc", "1.5", "0"])
async def test_get_user_not_found(client, user_id):
    res = await client.get(f"/api/users/{user_id}")
    assert res.status_code == 404
    assert res.json() == {"error": "User not found"}


# ─── POST /api/users ─────────────────────────────────────────────

async def test_create_user(client):
    res = await _create(client, name="  Ada Lovelace ", job=" Engineer ")
    assert res.status_code == 201
    body = res.json()
    assert set(body) == {"id", "name", "job", "createdAt"}
    assert body["id"] == 3
    assert body["name"] == "Ada Lovelace"
    assert body["job"] == "Engineer"
    assert body["createdAt"].endswith("Z")


async def test_create_then_list_all_includes_derived_record(client):
    before = (await client.get("/api/users/all")).json()
    previous_max = max(u["id"] for u in before["data"])

    created = (await _create(client)).json()
    after = (await client.get("/api/users/all")).json()

    assert created["id"] == previous_max + 1
    assert after["total"] == before["total"] + 1
    assert after["data"][-1] == {
        "id": previous_max + 1,
        "email": "ada.lovelace@example.com",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "job": "Engineer",
    }


@pytest.mark.parametrize("body, message", [
    ({}, 'Field "name" must be a string (min 2 chars)'),
    ({"name": "A", "job": "Engineer"}, 'Field "name" must be a string (min 2 chars)'),
    ({"name": "Ada"}, 'Field "job" must be a string (min 2 chars)'),
    ({"name": "Ada", "job": 7}, 'Field "job" must be a string (min 2 chars)'),
])
async def test_create_validation(client, store, body, message):
    res = await client.post("/api/users", json=body)
    assert res.status_code == 400
    assert res.json() == {"error": message}
    assert len(store) == 2


async def test_create_without_json_content_type_sees_empty_body(client):
    res = await client.post("/api/users", content=b"name=Ada&job=Engineer")
    assert res.status_code == 400
    assert res.json()["error"] == 'Field "name" must be a string (min 2 chars)'


async def test_create_malformed_json_is_internal_error(client):
    res = await client.post(
        "/api/users", content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 500
    body = res.json()
    assert body["error"] == "Internal error"
    assert body["detail"]


@pytest.mark.parametrize("raw", [b"5", b"\"Ada\"", b"null", b"true"])
async def test_create_scalar_json_body_is_internal_error(client, store, raw):
    res = await client.post(
        "/api/users", content=raw, headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 500
    assert res.json()["error"] == "Internal error"
    assert res.json()["detail"]
    assert len(store) == 2


async def test_create_array_json_body_sees_empty_fields(client):
    res = await client.post("/api/users", json=["Ada Lovelace", "Engineer"])
    assert res.status_code == 400
    assert res.json() == {"error": 'Field "name" must be a string (min 2 chars)'}


# ─── PUT /api/users/{id} ─────────────────────────────────────────

async def test_update_echoes_fields(client):
    res = await client.put("/api/users/1", json={"name": " Neo ", "job": "Zion"})
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == " Neo "
    assert body["job"] == "Zion"
    assert body["updatedAt"].endswith("Z")


async def test_update_marks_absent_fields_unchanged(client):
    res = await client.put("/api/users/1", json={"job": "Leader"})
    assert res.json()["name"] == "(unchanged)"
    assert res.json()["job"] == "Leader"


async def test_update_does_not_mutate_store(client):
    before = (await client.get("/api/users/1")).json()
    await client.put("/api/users/1", json={"name": "Changed Name", "job": "Other"})
    after = (await client.get("/api/users/1")).json()
    assert after == before


async def test_update_unknown_user_is_404_before_validation(client):
    res = await client.put("/api/users/99", json={"name": "x"})
    assert res.status_code == 404
    assert res.json() == {"error": "User not found"}


@pytest.mark.parametrize("body, field", [
    ({"name": "x"}, "name"),
    ({"name": None}, "name"),
    ({"job": 3}, "job"),
])
async def test_update_validation(client, body, field):
    res = await client.put("/api/users/1", json=body)
    assert res.status_code == 400
    assert res.json() == {
        "error": f'If provided, "{field}" must be a string (min 2 chars)',
    }


# ─── DELETE /api/users ───────────────────────────────────────────

async def test_delete_existing_user(client, store):
    res = await client.request("DELETE", "/api/users", json={"id": 1})
    assert res.status_code == 204
    assert res.content == b""
    assert len(store) == 1
    assert (await client.get("/api/users/1")).status_code == 404


async def test_delete_missing_user_leaves_store(client, store):
    res = await client.request("DELETE", "/api/users", json={"id": 99})
    assert res.status_code == 404
    assert res.json() == {"error": "User not found"}
    assert len(store) == 2


@pytest.mark.parametrize("body", [{}, {"id": "1"}, {"id": 1.5}, {"id": True}])
async def test_delete_requires_integer_id(client, store, body):
    res = await client.request("DELETE", "/api/users", json=body)
    assert res.status_code == 400
    assert res.json() == {"error": 'Field "id" must be an integer'}
    assert len(store) == 2


async def test_delete_then_create_does_not_reuse_id(client):
    created = (await _create(client)).json()
    await client.request("DELETE", "/api/users", json={"id": created["id"]})
    again = (await _create(client, name="Grace Hopper")).json()
    assert again["id"] == created["id"] + 1
