# tests/test_service_endpoints.py — Root, health and wiring tests
import pytest
from httpx import AsyncClient

from tms_service.core.config import Settings
from tms_service.entities import ENTITIES
from tms_service.main import create_app


@pytest.mark.asyncio
async def test_root(client: AsyncClient):
    resp = await client.get("/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["service"] == "tms_service"
    assert data["status"] == "running"


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "healthy"
    assert data["database"] == "connected"


def test_every_entity_has_a_get_route(app):
    paths = app.openapi()["paths"]
    for definition in ENTITIES:
        assert f"/api/{definition.name}/{{entity_id}}" in paths


def test_api_prefix_comes_from_settings():
    app = create_app(Settings(database_url="sqlite://", api_prefix="/tms"))
    paths = app.openapi()["paths"]
    assert "/tms/company/{entity_id}" in paths
    assert "/api/company/{entity_id}" not in paths
    app.state.database.dispose()
