"""/api/service-categories: public reads, admin-only writes, unique names."""
import uuid

import pytest

from brazucas.services.permissions import UserRole
from conftest import make_user_token


@pytest.mark.asyncio
async def test_admin_crud(client, session_factory) -> None:
    _, admin = await make_user_token(session_factory, role=UserRole.ADMIN)

    resp = await client.post("/api/service-categories", json={"name": "Limpeza"}, headers=admin)
    assert resp.status_code == 201, resp.text
    limpeza = resp.json()["data"]
    assert limpeza["active"] is True

    resp = await client.post("/api/service-categories", json={"name": "Aulas", "active": False}, headers=admin)
    assert resp.status_code == 201
    aulas = resp.json()["data"]

    names = [c["name"] for c in (await client.get("/api/service-categories")).json()["data"]]
    assert names == ["Aulas", "Limpeza"]
    active = (await client.get("/api/service-categories", params={"active": "true"})).json()["data"]
    assert [c["name"] for c in active] == ["Limpeza"]

    resp = await client.put(
        "/api/service-categories", params={"id": aulas["id"]}, json={"active": True}, headers=admin
    )
    assert resp.status_code == 200
    assert resp.json()["data"]["active"] is True
    assert resp.json()["data"]["name"] == "Aulas"

    one = await client.get("/api/service-categories", params={"id": limpeza["id"]})
    assert one.json()["data"]["name"] == "Limpeza"

    resp = await client.delete("/api/service-categories", params={"id": limpeza["id"]}, headers=admin)
    assert resp.status_code == 200
    assert resp.json()["data"]["deleted"] is True
    missing = await client.get("/api/service-categories", params={"id": limpeza["id"]})
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_duplicate_names_conflict(client, session_factory) -> None:
    _, admin = await make_user_token(session_factory, role=UserRole.ADMIN)
    await client.post("/api/service-categories", json={"name": "Limpeza"}, headers=admin)
    other = (await client.post("/api/service-categories", json={"name": "Mudanca"}, headers=admin)).json()["data"]

    resp = await client.post("/api/service-categories", json={"name": "limpeza"}, headers=admin)
    assert resp.status_code == 409

    resp = await client.put(
        "/api/service-categories", params={"id": other["id"]}, json={"name": "Limpeza"}, headers=admin
    )
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_writes_need_admin(client, session_factory) -> None:
    _, user = await make_user_token(session_factory, role=UserRole.ADVERTISER)
    resp = await client.post("/api/service-categories", json={"name": "Limpeza"}, headers=user)
    assert resp.status_code == 403
    assert resp.json()["error"] == "Only administrators can manage service categories"

    resp = await client.post("/api/service-categories", json={"name": "Limpeza"})
    assert resp.status_code == 401

    resp = await client.delete("/api/service-categories", params={"id": str(uuid.uuid4())}, headers=user)
    assert resp.status_code == 403
