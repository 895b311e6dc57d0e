"""
API tests for /e-library.
"""


async def test_e_library_lifecycle(client):
    created = await client.post(
        "/e-library",
        json={"author": "Hristo Botev", "title": "Poems", "organization": " National Library "},
    )
    assert created.status_code == 201
    item = created.json()
    assert item["organization"] == "National Library"

    updated = await client.put(f"/e-library/{item['id']}", json={"organization": None})
    assert updated.status_code == 200
    assert updated.json()["organization"] is None
    assert updated.json()["title"] == "Poems"

    assert (await client.delete(f"/e-library/{item['id']}")).status_code == 204
    missing = await client.get(f"/e-library/{item['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Item not found"}


async def test_e_library_newest_first(client):
    for title in ("Old", "New"):
        await client.post("/e-library", json={"author": "X", "title": title})
    response = await client.get("/e-library")
    assert [i["title"] for i in response.json()] == ["New", "Old"]


async def test_e_library_requires_title(client):
    response = await client.post("/e-library", json={"author": "X", "title": ""})
    assert response.status_code == 400
    assert "title" in response.json()["error"]
