"""Update & Delete Person — verifies partial merge, validation, and removal.

Invariants:
    - PATCH merges only supplied fields and returns the post-update state
    - Nulling name/companyId → 400; unknown id → 404 (never success with null)
    - DELETE returns the removed document; the person is unreadable afterwards
    - Deleting a nonexistent id → 404
"""

from uuid import uuid4


async def _create(client, company_id: str, **fields):
    res = await client.post(
        "/api/v1/people", json={"companyId": company_id, **fields},
    )
    return res.json()["result"]


async def test_update_merges_supplied_fields(client, seed_company):
    person = await _create(
        client, str(seed_company.id), name="Alice", position="Engineer",
    )

    res = await client.patch(
        f"/api/v1/people/{person['id']}", json={"position": "CTO"},
    )

    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["message"] == f"we update this document by this id: {person['id']}"
    assert body["result"]["position"] == "CTO"
    assert body["result"]["name"] == "Alice"
    assert body["result"]["companyId"] == str(seed_company.id)


async def test_update_can_clear_optional_field(client, seed_company):
    person = await _create(
        client, str(seed_company.id), name="Alice", phone="555-0100",
    )

    res = await client.patch(
        f"/api/v1/people/{person['id']}", json={"phone": None},
    )

    assert res.status_code == 200
    assert res.json()["result"]["phone"] is None


async def test_update_rejects_nulling_required_field(client, seed_company):
    person = await _create(client, str(seed_company.id), name="Alice")

    for payload in ({"name": None}, {"companyId": None}, {"name": " "}):
        res = await client.patch(f"/api/v1/people/{person['id']}", json=payload)
        assert res.status_code == 400
        assert res.json()["message"] == "Required fields are not supplied"


async def test_update_persists_change(client, seed_company):
    person = await _create(client, str(seed_company.id), name="Alice")
    await client.patch(f"/api/v1/people/{person['id']}", json={"name": "Alicia"})

    res = await client.get(f"/api/v1/people/{person['id']}")

    assert res.json()["result"][0]["name"] == "Alicia"


async def test_update_unknown_id_returns_404(client):
    fake_id = str(uuid4())

    res = await client.patch(f"/api/v1/people/{fake_id}", json={"name": "X"})

    assert res.status_code == 404
    assert res.json()["result"] is None


async def test_delete_returns_removed_document(client, seed_company):
    person = await _create(client, str(seed_company.id), name="Alice")

    res = await client.delete(f"/api/v1/people/{person['id']}")

    assert res.status_code == 200
    body = res.json()
    assert body["message"] == f"Successfully Deleted the document by id: {person['id']}"
    assert body["result"]["id"] == person["id"]
    assert body["result"]["name"] == "Alice"


async def test_deleted_person_is_unreadable(client, seed_company):
    person = await _create(client, str(seed_company.id), name="Alice")
    await client.delete(f"/api/v1/people/{person['id']}")

    res = await client.get(f"/api/v1/people/{person['id']}")

    assert res.status_code == 404


async def test_delete_nonexistent_returns_404(client):
    fake_id = str(uuid4())

    res = await client.delete(f"/api/v1/people/{fake_id}")

    assert res.status_code == 404
    assert res.json()["message"] == f"No document found by this id: {fake_id}"


async def test_delete_twice_second_is_404(client, seed_company):
    person = await _create(client, str(seed_company.id), name="Alice")

    first = await client.delete(f"/api/v1/people/{person['id']}")
    second = await client.delete(f"/api/v1/people/{person['id']}")

    assert first.status_code == 200
    assert second.status_code == 404
