"""
/api/news over HTTP: create, the GET filters, approve/reject via PATCH,
submit, update and delete, with the envelope and camelCase fields.
"""
import uuid

import pytest

from brazucas.services.permissions import UserRole
from conftest import make_user_token

NEWS = {"title": "Festa junina", "content": "Sábado no parque.", "excerpt": "Festa no parque"}


async def _post_news(client, headers, **overrides):
    resp = await client.post("/api/news", json={**NEWS, **overrides}, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


@pytest.mark.asyncio
async def test_create_requires_auth(client) -> None:
    resp = await client.post("/api/news", json=NEWS)
    assert resp.status_code == 401
    assert resp.json()["success"] is False


@pytest.mark.asyncio
async def test_create_returns_camel_case_with_status_and_author(client, session_factory) -> None:
    author, headers = await make_user_token(session_factory, nickname="Lucia")
    resp = await client.post("/api/news", json={**NEWS, "imageUrl": ""}, headers=headers)
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "News created successfully"
    data = body["data"]
    assert data["authorId"] == str(author.id)
    assert data["authorNickname"] == "Lucia"
    assert data["approved"] is None
    assert data["published"] is False
    assert data["status"] == "draft"
    assert data["imageUrl"] is None


@pytest.mark.asyncio
async def test_create_validation_errors_are_400(client, session_factory) -> None:
    _, headers = await make_user_token(session_factory)
    resp = await client.post("/api/news", json={**NEWS, "title": "x" * 201}, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["success"] is False
    assert resp.json()["error"].startswith("title")

    resp = await client.post("/api/news", json={**NEWS, "imageUrl": "not a url"}, headers=headers)
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_full_approval_flow(client, session_factory) -> None:
    _, author_headers = await make_user_token(session_factory)
    _, admin_headers = await make_user_token(session_factory, role=UserRole.ADMIN, nickname="Admin")

    item = await _post_news(client, author_headers, published=True)
    assert item["status"] == "pending_approval"

    pending = (await client.get("/api/news", params={"pending": "true"}, headers=admin_headers)).json()["data"]
    assert [p["id"] for p in pending] == [item["id"]]

    resp = await client.patch("/api/news", json={"id": item["id"], "approved": True}, headers=admin_headers)
    assert resp.status_code == 200, resp.text
    assert resp.json()["message"] == "News approved successfully"
    approved = resp.json()["data"]
    assert approved["status"] == "published"
    assert approved["approvedAt"] is not None

    published = (await client.get("/api/news", params={"published": "true"})).json()["data"]
    assert [p["id"] for p in published] == [item["id"]]
    assert published[0]["approvedAt"] is not None

    pending = (await client.get("/api/news", params={"pending": "true"}, headers=admin_headers)).json()["data"]
    assert pending == []


@pytest.mark.asyncio
async def test_reject_via_patch(client, session_factory) -> None:
    _, author_headers = await make_user_token(session_factory)
    _, admin_headers = await make_user_token(session_factory, role=UserRole.ADMIN)
    item = await _post_news(client, author_headers, published=True)

    resp = await client.patch(
        "/api/news", json={"id": item["id"], "approved": False, "reason": "Duplicada"}, headers=admin_headers
    )
    assert resp.status_code == 200
    assert resp.json()["message"] == "News rejected successfully"
    assert resp.json()["data"]["status"] == "rejected"
    assert resp.json()["data"]["approved"] is False


@pytest.mark.asyncio
async def test_patch_is_admin_only_and_checks_existence(client, session_factory) -> None:
    _, author_headers = await make_user_token(session_factory)
    _, admin_headers = await make_user_token(session_factory, role=UserRole.ADMIN)
    item = await _post_news(client, author_headers, published=True)

    resp = await client.patch("/api/news", json={"id": item["id"], "approved": True}, headers=author_headers)
    assert resp.status_code == 403

    resp = await client.patch("/api/news", json={"id": str(uuid.uuid4()), "approved": True}, headers=admin_headers)
    assert resp.status_code == 404
    assert resp.json()["error"] == "News not found"

    resp = await client.patch("/api/news", json={"id": item["id"], "approved": "yes"}, headers=admin_headers)
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_pending_list_requires_admin(client, session_factory) -> None:
    _, headers = await make_user_token(session_factory)
    resp = await client.get("/api/news", params={"pending": "true"}, headers=headers)
    assert resp.status_code == 403
    resp = await client.get("/api/news", params={"pending": "true"})
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_my_list_and_get_by_id(client, session_factory) -> None:
    _, alice = await make_user_token(session_factory, nickname="Alice")
    _, bruno = await make_user_token(session_factory, nickname="Bruno")
    a1 = await _post_news(client, alice)
    a2 = await _post_news(client, alice, title="Segunda")
    await _post_news(client, bruno)

    mine = (await client.get("/api/news", params={"my": "true"}, headers=alice)).json()["data"]
    assert [m["id"] for m in mine] == [a2["id"], a1["id"]]
    assert all(m["approved"] is None for m in mine)

    assert (await client.get("/api/news", params={"my": "true"})).status_code == 401

    everything = (await client.get("/api/news")).json()["data"]
    assert len(everything) == 3

    one = await client.get("/api/news", params={"id": a1["id"]})
    assert one.status_code == 200
    assert one.json()["data"]["title"] == NEWS["title"]

    missing = await client.get("/api/news", params={"id": str(uuid.uuid4())})
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_submit_endpoint(client, session_factory) -> None:
    _, headers = await make_user_token(session_factory)
    _, stranger = await make_user_token(session_factory)
    item = await _post_news(client, headers)

    assert (await client.post(f"/api/news/{item['id']}/submit", headers=stranger)).status_code == 403

    resp = await client.post(f"/api/news/{item['id']}/submit", headers=headers)
    assert resp.status_code == 200, resp.text
    assert resp.json()["data"]["status"] == "pending_approval"
    assert resp.json()["message"] == "News submitted for approval"


@pytest.mark.asyncio
async def test_update_by_owner_and_stranger(client, session_factory) -> None:
    _, owner = await make_user_token(session_factory)
    _, stranger = await make_user_token(session_factory)
    item = await _post_news(client, owner)

    resp = await client.put("/api/news", json={"id": item["id"], "title": "Novo"}, headers=stranger)
    assert resp.status_code == 403
    assert resp.json()["error"] == "You can only edit your own content"

    resp = await client.put("/api/news", json={"id": item["id"], "title": "Novo", "published": True}, headers=owner)
    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["title"] == "Novo"
    assert data["excerpt"] == NEWS["excerpt"]
    assert data["status"] == "pending_approval"


@pytest.mark.asyncio
async def test_delete(client, session_factory) -> None:
    _, owner = await make_user_token(session_factory)
    _, stranger = await make_user_token(session_factory)
    _, admin = await make_user_token(session_factory, role=UserRole.ADMIN)
    first = await _post_news(client, owner)
    second = await _post_news(client, owner)

    assert (await client.delete("/api/news", params={"id": first["id"]}, headers=stranger)).status_code == 403

    resp = await client.delete("/api/news", params={"id": first["id"]}, headers=owner)
    assert resp.status_code == 200
    assert resp.json()["data"] == {"id": first["id"], "deleted": True}

    assert (await client.delete("/api/news", params={"id": second["id"]}, headers=admin)).status_code == 200
    assert (await client.delete("/api/news", params={"id": second["id"]}, headers=admin)).status_code == 404
    assert (await client.get("/api/news")).json()["data"] == []


@pytest.mark.asyncio
async def test_update_without_fields_is_400(client, session_factory) -> None:
    _, owner = await make_user_token(session_factory)
    item = await _post_news(client, owner)
    resp = await client.put("/api/news", json={"id": item["id"]}, headers=owner)
    assert resp.status_code == 400
    assert resp.json()["error"] == "No fields to update"
