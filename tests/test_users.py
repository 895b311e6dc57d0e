"""
API tests for /users.
"""


async def test_create_user_normalizes_contacts(client):
    response = await client.post(
        "/users",
        json={"name": "  Maria Ivanova ", "emails": [" maria@x.org ", "", 7], "phones": ["+359 888"]},
    )
    assert response.status_code == 201
    user = response.json()
    assert user["name"] == "Maria Ivanova"
    assert [e["email"] for e in user["emails"]] == ["maria@x.org"]
    assert user["emails"][0]["userId"] == user["id"]
    assert [p["phone"] for p in user["phones"]] == ["+359 888"]
    assert user["deletedAt"] is None


async def test_create_user_requires_name(client):
    response = await client.post("/users", json={"emails": []})
    assert response.status_code == 400
    assert response.json() == {"error": "name is required and must be a string"}


async def test_create_user_rejects_non_array_emails(client):
    response = await client.post("/users", json={"name": "Maria", "emails": "maria@x.org"})
    assert response.status_code == 400
    assert response.json() == {"error": "emails must be an array of strings"}


async def test_list_users_in_creation_order(client):
    for name in ("First", "Second"):
        await client.post("/users", json={"name": name})
    response = await client.get("/users")
    assert response.status_code == 200
    assert [u["name"] for u in response.json()] == ["First", "Second"]


async def test_update_replaces_emails_and_keeps_phones(client):
    created = (
        await client.post("/users", json={"name": "Maria", "emails": ["old@x.org"], "phones": ["1"]})
    ).json()

    response = await client.put(
        f"/users/{created['id']}",
        json={"emails": ["new@x.org", "new@x.org", "other@x.org"]},
    )

    assert response.status_code == 200
    user = response.json()
    assert [e["email"] for e in user["emails"]] == ["new@x.org", "other@x.org"]
    assert [p["phone"] for p in user["phones"]] == ["1"]


async def test_update_with_empty_array_clears_phones(client):
    created = (await client.post("/users", json={"name": "Maria", "phones": ["1", "2"]})).json()
    response = await client.put(f"/users/{created['id']}", json={"phones": []})
    assert response.status_code == 200
    assert response.json()["phones"] == []


async def test_update_rejects_blank_name(client):
    created = (await client.post("/users", json={"name": "Maria"})).json()
    response = await client.put(f"/users/{created['id']}", json={"name": "  "})
    assert response.status_code == 400
    assert response.json() == {"error": "name must be a non-empty string"}


async def test_email_taken_by_live_user_conflicts(client):
    await client.post("/users", json={"name": "A", "emails": ["shared@x.org"]})
    response = await client.post("/users", json={"name": "B", "emails": ["shared@x.org"]})
    assert response.status_code == 409
    assert response.json() == {"error": "Unique constraint failed", "fields": ["email"]}


async def test_email_of_deleted_user_can_be_reused(client):
    first = (await client.post("/users", json={"name": "A", "emails": ["shared@x.org"]})).json()
    await client.delete(f"/users/{first['id']}")
    response = await client.post("/users", json={"name": "B", "emails": ["shared@x.org"]})
    assert response.status_code == 201


async def test_delete_user_twice(client):
    created = (await client.post("/users", json={"name": "Maria"})).json()

    first = await client.delete(f"/users/{created['id']}")
    assert first.status_code == 204
    assert first.content == b""

    second = await client.delete(f"/users/{created['id']}")
    assert second.status_code == 404
    assert second.json() == {"error": "User not found"}

    assert (await client.get(f"/users/{created['id']}")).status_code == 404
    assert (await client.get("/users")).json() == []


async def test_invalid_user_id(client):
    response = await client.get("/users/abc")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid user id"}
