"""/api/status-system catalog, contextual lists and item history."""
import uuid

import pytest

from brazucas.services.permissions import UserRole
from conftest import make_user_token


@pytest.mark.asyncio
async def test_catalog(client) -> None:
    resp = await client.get("/api/status-system")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert [s["code"] for s in data["statuses"]] == ["draft", "pending_approval", "published", "rejected"]
    assert data["statuses"][0]["displayName"] == "Rascunho"
    assert "headerBg" in data["statuses"][0]["colors"]
    assert {c["name"] for c in data["contentTypes"]} == {"news", "ads"}


@pytest.mark.asyncio
async def test_contextual(client) -> None:
    resp = await client.get("/api/status-system/contextual", params={"contentType": "news", "context": "approval"})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["defaultStatus"] == "pending_approval"
    assert [s["code"] for s in data["availableStatuses"]] == ["pending_approval", "published", "rejected"]

    resp = await client.get("/api/status-system/contextual", params={"contentType": "events"})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_history_endpoint(client, session_factory) -> None:
    _, owner = await make_user_token(session_factory)
    _, admin = await make_user_token(session_factory, role=UserRole.ADMIN)
    _, stranger = await make_user_token(session_factory)
    item = (
        await client.post(
            "/api/news",
            json={"title": "T", "content": "C", "excerpt": "E", "published": True},
            headers=owner,
        )
    ).json()["data"]
    await client.patch("/api/news", json={"id": item["id"], "approved": False, "reason": "Spam"}, headers=admin)

    params = {"contentType": "news", "contentId": item["id"]}
    resp = await client.get("/api/status-system/history", params=params, headers=owner)
    assert resp.status_code == 200, resp.text
    entries = resp.json()["data"]
    assert {e["eventType"] for e in entries} == {"created", "rejected"}
    rejected = next(e for e in entries if e["eventType"] == "rejected")
    assert rejected["reason"] == "Spam"
    assert rejected["statusCode"] == "rejected"
    assert rejected["approved"] is False

    assert (await client.get("/api/status-system/history", params=params, headers=stranger)).status_code == 403
    assert (await client.get("/api/status-system/history", params=params)).status_code == 401

    unknown = {"contentType": "news", "contentId": str(uuid.uuid4())}
    assert (await client.get("/api/status-system/history", params=unknown, headers=owner)).status_code == 403
    resp = await client.get("/api/status-system/history", params=unknown, headers=admin)
    assert resp.status_code == 200
    assert resp.json()["data"] == []
