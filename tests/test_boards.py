# tests/test_boards.py — Department, board and column router tests
import uuid

import pytest
from httpx import AsyncClient

from tests.conftest import create_entity


@pytest.mark.asyncio
async def test_create_board(client: AsyncClient, department_id):
    resp = await client.post(
        "/api/board",
        json={
            "name": "Sprint Board",
            "description": "Main sprint board",
            "department_id": department_id,
            "board_type": 1,
            "is_private": True,
        },
    )
    assert resp.status_code == 201
    assert resp.json() == {
        "name": "Sprint Board",
        "description": "Main sprint board",
        "board_type": 1,
        "is_private": True,
    }


@pytest.mark.asyncio
async def test_board_defaults(client: AsyncClient, board_id):
    resp = await client.get(f"/api/board/{board_id}")
    assert resp.status_code == 200
    data = resp.json()
    assert data["board_type"] == 0
    assert data["is_private"] is False


@pytest.mark.asyncio
async def test_create_board_for_unknown_department(client: AsyncClient):
    resp = await client.post(
        "/api/board", json={"name": "Orphan", "department_id": str(uuid.uuid4())}
    )
    assert resp.status_code == 400
    assert "Department" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_create_board_without_department(client: AsyncClient):
    resp = await client.post("/api/board", json={"name": "Orphan"})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_create_department_for_unknown_company(client: AsyncClient):
    resp = await client.post(
        "/api/department", json={"name": "R&D", "company_id": str(uuid.uuid4())}
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_soft_deleted_board_stays_readable(client: AsyncClient, board_id):
    resp = await client.delete(f"/api/board/{board_id}")
    assert resp.status_code == 204

    resp = await client.get(f"/api/board/{board_id}")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Sprint Board"


@pytest.mark.asyncio
async def test_soft_deleted_board_cannot_be_updated(client: AsyncClient, board_id, department_id):
    await client.delete(f"/api/board/{board_id}")

    resp = await client.put(
        f"/api/board/{board_id}",
        json={"id": board_id, "name": "Revived", "department_id": department_id},
    )
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_board_twice(client: AsyncClient, board_id):
    assert (await client.delete(f"/api/board/{board_id}")).status_code == 204
    assert (await client.delete(f"/api/board/{board_id}")).status_code == 204


@pytest.mark.asyncio
async def test_column_on_soft_deleted_board_is_rejected(client: AsyncClient, board_id):
    await client.delete(f"/api/board/{board_id}")

    resp = await client.post("/api/column", json={"name": "To Do", "board_id": board_id})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_create_and_move_column(client: AsyncClient, board_id):
    column_id = await create_entity(
        client, "column", {"name": "To Do", "position": 0, "board_id": board_id}
    )

    resp = await client.put(
        f"/api/column/{column_id}",
        json={"id": column_id, "name": "Backlog", "position": 2, "board_id": board_id},
    )
    assert resp.status_code == 200
    assert resp.json() == {"name": "Backlog", "position": 2}


@pytest.mark.asyncio
async def test_move_board_to_other_department(client: AsyncClient, board_id, company_id):
    other_department = await create_entity(
        client, "department", {"name": "Support", "company_id": company_id}
    )

    resp = await client.put(
        f"/api/board/{board_id}",
        json={"id": board_id, "name": "Support Board", "department_id": other_department},
    )
    assert resp.status_code == 200
    assert resp.json()["name"] == "Support Board"


@pytest.mark.asyncio
async def test_board_membership(client: AsyncClient, board_id, user_id):
    role_id = await create_entity(client, "role", {"name": "Maintainer"})
    membership_id = await create_entity(
        client, "boarduser", {"board_id": board_id, "user_id": user_id}
    )
    grant_id = await create_entity(
        client,
        "boarduserrole",
        {"board_id": board_id, "user_id": user_id, "role_id": role_id},
    )

    resp = await client.get(f"/api/boarduser/{membership_id}")
    assert resp.json() == {"board_id": board_id, "user_id": user_id}

    resp = await client.get(f"/api/boarduserrole/{grant_id}")
    assert resp.json()["role_id"] == role_id


@pytest.mark.asyncio
async def test_board_membership_for_unknown_user(client: AsyncClient, board_id):
    resp = await client.post(
        "/api/boarduser", json={"board_id": board_id, "user_id": str(uuid.uuid4())}
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_board_of_deleted_department_stays_editable(
    client: AsyncClient, company_id, department_id, board_id
):
    resp = await client.delete(f"/api/department/{department_id}")
    assert resp.status_code == 204

    resp = await client.put(
        f"/api/board/{board_id}",
        json={"id": board_id, "name": "Renamed", "department_id": department_id},
    )
    assert resp.status_code == 200
    assert resp.json()["name"] == "Renamed"

    archived_id = await create_entity(
        client, "department", {"name": "Archive", "company_id": company_id}
    )
    await client.delete(f"/api/department/{archived_id}")

    resp = await client.put(
        f"/api/board/{board_id}",
        json={"id": board_id, "name": "Moved", "department_id": archived_id},
    )
    assert resp.status_code == 400
    assert "Department" in resp.json()["detail"]
