"""
Record Store API - test configuration and fixtures.

Every test gets its own SQLite file under ``tmp_path`` with the schema
and seed types applied, and an httpx client talking to an application
built around that database.
"""
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from record_store_api.app.core.config import Settings
from record_store_api.app.core.db import Database
from record_store_api.app.main import create_app


@pytest.fixture
def database(tmp_path) -> Database:
    """Fresh, migrated database for each test"""
    db = Database(str(tmp_path / "records.db"))
    db.init()
    return db


@pytest.fixture
def app(database: Database):
    return create_app(settings=Settings(api_prefix="", cors_origins=[]), database=database)


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    # raise_app_exceptions=False lets 500 responses reach the test
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def create_author(client: AsyncClient):
    """Factory creating an author through the API and returning its JSON"""

    async def _create(full_name: str = "Petar Petrov", **fields) -> dict:
        response = await client.post("/authors", json={"fullName": full_name, **fields})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_publication(client: AsyncClient):
    """Factory creating a publication through the API and returning its JSON"""

    async def _create(**fields) -> dict:
        body = {"year": 2024, "title": "Archive study", "typeId": 1, **fields}
        response = await client.post("/publications", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
