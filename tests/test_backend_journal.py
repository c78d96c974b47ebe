from conftest import OWNER, owner_headers


def _create(client, day="2024-01-01", content="Good day", owner=OWNER):
    return client.post("/v1/journal", json={"date": day, "content": content}, headers=owner_headers(owner))


def test_create_and_list(client):
    record = _create(client).json()

    assert record["date"] == "2024-01-01"
    assert record["content"] == "Good day"
    items = client.get("/v1/journal", headers=owner_headers()).json()["items"]
    assert [item["id"] for item in items] == [record["id"]]


def test_second_entry_for_same_day_conflicts(client):
    _create(client)

    response = _create(client, content="Again")

    assert response.status_code == 409
    assert len(client.get("/v1/journal", headers=owner_headers()).json()["items"]) == 1


def test_same_day_for_different_owners_is_allowed(client):
    assert _create(client).status_code == 200
    assert _create(client, owner="other@example.com").status_code == 200


def test_lookup_by_date(client):
    _create(client, day="2024-01-01")
    _create(client, day="2024-01-02", content="Next")

    items = client.get("/v1/journal", params={"date": "2024-01-02"}, headers=owner_headers()).json()["items"]

    assert [item["content"] for item in items] == ["Next"]


def test_patch_updates_content_in_place(client):
    record = _create(client).json()

    updated = client.patch(f"/v1/journal/{record['id']}", json={"content": "Great day"}, headers=owner_headers())

    assert updated.json()["content"] == "Great day"
    items = client.get("/v1/journal", headers=owner_headers()).json()["items"]
    assert [(item["id"], item["content"]) for item in items] == [(record["id"], "Great day")]


def test_patch_and_delete_unknown_entry(client):
    assert client.patch("/v1/journal/nope", json={"content": "x"}, headers=owner_headers()).status_code == 404
    assert client.delete("/v1/journal/nope", headers=owner_headers()).status_code == 404


def test_delete(client):
    record = _create(client).json()

    assert client.delete(f"/v1/journal/{record['id']}", headers=owner_headers()).json() == {"ok": True}
    assert client.get("/v1/journal", headers=owner_headers()).json()["items"] == []


def test_responses_only_expose_public_fields(client):
    record = _create(client).json()

    assert set(record) == {"id", "owner_id", "date", "content"}
