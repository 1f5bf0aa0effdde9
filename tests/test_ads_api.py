"""/api/ads: ad-specific fields, messages and ownership rules."""
import pytest

from brazucas.services.permissions import UserRole
from conftest import make_user_token

AD = {
    "title": "Faxina",
    "description": "Limpeza residencial em Cork",
    "category": "Limpeza",
    "price": "€20/h",
    "contactEmail": "faxina@example.com",
}


@pytest.mark.asyncio
async def test_create_ad_with_optional_urls(client, session_factory) -> None:
    _, headers = await make_user_token(session_factory, role=UserRole.ADVERTISER, nickname="Rosa")
    resp = await client.post(
        "/api/ads",
        json={**AD, "youtubeUrl": "https://www.youtube.com/watch?v=abc", "imageUrl": ""},
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    data = resp.json()["data"]
    assert resp.json()["message"] == "Advertisement created successfully"
    assert data["contactEmail"] == "faxina@example.com"
    assert data["youtubeUrl"].startswith("https://www.youtube.com/watch")
    assert data["imageUrl"] is None
    assert data["authorNickname"] == "Rosa"
    assert data["status"] == "draft"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "override",
    [
        {"contactEmail": "not-an-email"},
        {"price": "x" * 21},
        {"category": ""},
        {"description": "d" * 501},
    ],
)
async def test_invalid_ads_rejected(client, session_factory, override) -> None:
    _, headers = await make_user_token(session_factory, role=UserRole.ADVERTISER)
    resp = await client.post("/api/ads", json={**AD, **override}, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["success"] is False


@pytest.mark.asyncio
async def test_approve_and_reject_messages(client, session_factory) -> None:
    _, owner = await make_user_token(session_factory, role=UserRole.ADVERTISER)
    _, admin = await make_user_token(session_factory, role=UserRole.ADMIN)
    ad = (await client.post("/api/ads", json={**AD, "published": True}, headers=owner)).json()["data"]

    resp = await client.patch("/api/ads", json={"id": ad["id"], "approved": True}, headers=admin)
    assert resp.json()["message"] == "Advertisement approved successfully"
    assert resp.json()["data"]["status"] == "published"

    resp = await client.patch("/api/ads", json={"id": ad["id"], "approved": False}, headers=admin)
    assert resp.json()["message"] == "Advertisement rejected successfully"
    assert resp.json()["data"]["status"] == "rejected"

    published = (await client.get("/api/ads", params={"published": "true"})).json()["data"]
    assert published == []


@pytest.mark.asyncio
async def test_owner_edit_after_rejection_returns_to_review(client, session_factory) -> None:
    _, owner = await make_user_token(session_factory, role=UserRole.ADVERTISER)
    _, admin = await make_user_token(session_factory, role=UserRole.ADMIN)
    ad = (await client.post("/api/ads", json={**AD, "published": True}, headers=owner)).json()["data"]
    await client.patch("/api/ads", json={"id": ad["id"], "approved": False}, headers=admin)

    resp = await client.put("/api/ads", json={"id": ad["id"], "price": "€18/h"}, headers=owner)
    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["price"] == "€18/h"
    assert data["approved"] is None
    assert data["approvedAt"] is None
    assert data["status"] == "pending_approval"


@pytest.mark.asyncio
async def test_delete_someone_elses_ad_is_forbidden(client, session_factory) -> None:
    _, owner = await make_user_token(session_factory, role=UserRole.ADVERTISER)
    _, other = await make_user_token(session_factory, role=UserRole.ADVERTISER)
    ad = (await client.post("/api/ads", json=AD, headers=owner)).json()["data"]

    resp = await client.delete("/api/ads", params={"id": ad["id"]}, headers=other)
    assert resp.status_code == 403
    assert resp.json()["error"] == "You can only delete your own content"

    resp = await client.delete("/api/ads", params={"id": ad["id"]}, headers=owner)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Advertisement deleted successfully"
