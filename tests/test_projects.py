"""
API tests for /projects.
"""
import pytest

from record_store_api.app.repositories.lookups import ProjectTypeRepository


def project_body(**fields):
    body = {"startDate": "2025-01-10", "description": "Newspaper archive", "typeId": 1}
    body.update(fields)
    return body


async def test_create_project_with_type_id(client):
    response = await client.post("/projects", json=project_body(websiteUrl="https://example.org"))
    assert response.status_code == 201
    project = response.json()
    assert project["startDate"] == "2025-01-10"
    assert project["endDate"] is None
    assert project["typeId"] == 1
    assert project["type"]["name"] == "National projects"
    assert project["websiteUrl"] == "https://example.org"


async def test_create_project_with_type_name(client):
    body = project_body(typeName="  International projects ")
    del body["typeId"]
    response = await client.post("/projects", json=body)
    assert response.status_code == 201
    assert response.json()["typeId"] == 2


async def test_datetime_start_keeps_calendar_date(client):
    response = await client.post("/projects", json=project_body(startDate="2025-03-04T10:00:00Z"))
    assert response.status_code == 201
    assert response.json()["startDate"] == "2025-03-04"


async def test_unknown_type_name(client):
    body = project_body(typeName="Secret projects")
    del body["typeId"]
    response = await client.post("/projects", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid typeName (not found)"}


async def test_both_type_references_rejected(client):
    response = await client.post("/projects", json=project_body(typeName="National projects"))
    assert response.status_code == 400
    assert response.json() == {"error": "Provide only one of typeId or typeName (not both)"}


async def test_type_reference_required(client):
    body = project_body()
    del body["typeId"]
    response = await client.post("/projects", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Either typeId or typeName is required"}


async def test_start_date_required(client):
    body = project_body()
    del body["startDate"]
    response = await client.post("/projects", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "startDate is required and must be a valid date"}


@pytest.mark.parametrize(
    "end_date, expected_status",
    [("2025-01-09", 400), ("2025-01-10", 201), ("2025-01-11", 201)],
)
async def test_end_date_boundary(client, end_date, expected_status):
    response = await client.post("/projects", json=project_body(endDate=end_date))
    assert response.status_code == expected_status
    if expected_status == 400:
        assert response.json() == {"error": "endDate cannot be earlier than startDate"}


async def test_deleted_type_cannot_be_referenced(client, database):
    ProjectTypeRepository(database).soft_delete(2)
    response = await client.post("/projects", json=project_body(typeId=2))
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid typeId (not found)"}
    assert (await client.get("/projects")).json() == []


async def test_update_end_date_checked_against_stored_start(client):
    project = (await client.post("/projects", json=project_body())).json()
    response = await client.put(f"/projects/{project['id']}", json={"endDate": "2024-12-31"})
    assert response.status_code == 400
    assert response.json() == {"error": "endDate cannot be earlier than startDate"}


async def test_update_clears_end_date_and_changes_type(client):
    project = (await client.post("/projects", json=project_body(endDate="2025-06-01"))).json()
    response = await client.put(
        f"/projects/{project['id']}",
        json={"endDate": None, "typeName": "Institutional projects"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["endDate"] is None
    assert body["typeId"] == 3
    assert body["description"] == "Newspaper archive"


async def test_projects_newest_first_and_by_type(client):
    first = (await client.post("/projects", json=project_body(typeId=1))).json()
    second = (await client.post("/projects", json=project_body(typeId=2))).json()
    third = (await client.post("/projects", json=project_body(typeId=1))).json()

    listed = (await client.get("/projects")).json()
    assert [p["id"] for p in listed] == [third["id"], second["id"], first["id"]]

    by_type = await client.get("/projects/by-type/1")
    assert by_type.status_code == 200
    assert [p["id"] for p in by_type.json()] == [third["id"], first["id"]]


async def test_by_type_unknown_type(client):
    response = await client.get("/projects/by-type/99")
    assert response.status_code == 404
    assert response.json() == {"error": "Project type not found"}


async def test_delete_project(client):
    project = (await client.post("/projects", json=project_body())).json()
    assert (await client.delete(f"/projects/{project['id']}")).status_code == 204
    assert (await client.delete(f"/projects/{project['id']}")).status_code == 404
    assert (await client.get("/projects")).json() == []


async def test_update_rejects_empty_end_date(client):
    project = (await client.post("/projects", json=project_body(endDate="2025-06-01"))).json()
    response = await client.put(f"/projects/{project['id']}", json={"endDate": ""})
    assert response.status_code == 400
    assert response.json() == {"error": "endDate must be a valid date (or null)"}
    assert (await client.get(f"/projects/{project['id']}")).json()["endDate"] == "2025-06-01"


async def test_create_treats_empty_end_date_as_absent(client):
    response = await client.post("/projects", json=project_body(endDate=""))
    assert response.status_code == 201
    assert response.json()["endDate"] is None
