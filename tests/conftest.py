# tests/conftest.py — Shared test fixtures
import os
import uuid

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Use in-memory SQLite for tests
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["EVENTS_ENABLED"] = "false"

from tms_service.core.config import Settings
from tms_service.main import create_app


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        events_enabled=False,
        create_schema_on_startup=False,
    )


@pytest.fixture
def app(settings):
    """Application bound to a fresh in-memory database"""
    application = create_app(settings)
    assert application.state.database.init_db()
    yield application
    application.state.database.dispose()


@pytest.fixture
def db_session(app):
    session = app.state.database.session()
    yield session
    session.close()


@pytest_asyncio.fixture
async def client(app):
    """HTTP test client for the application"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def id_from_location(response) -> str:
    """Identifier of a created record, taken from its Location header"""
    location = response.headers["location"]
    entity_id = location.rstrip("/").rsplit("/", 1)[-1]
    uuid.UUID(entity_id)
    return entity_id


async def create_entity(client: AsyncClient, route: str, payload: dict) -> str:
    resp = await client.post(f"/api/{route}", json=payload)
    assert resp.status_code == 201, resp.text
    return id_from_location(resp)


@pytest_asyncio.fixture
async def company_id(client):
    return await create_entity(client, "company", {"name": "Acme"})


@pytest_asyncio.fixture
async def department_id(client, company_id):
    return await create_entity(
        client, "department", {"name": "Engineering", "company_id": company_id}
    )


@pytest_asyncio.fixture
async def board_id(client, department_id):
    return await create_entity(
        client, "board", {"name": "Sprint Board", "department_id": department_id}
    )


@pytest_asyncio.fixture
async def user_id(client):
    return await create_entity(
        client,
        "user",
        {"first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com"},
    )


@pytest_asyncio.fixture
async def task_id(client, board_id, user_id):
    return await create_entity(
        client,
        "task",
        {"title": "Implement login", "board_id": board_id, "author_id": user_id},
    )
