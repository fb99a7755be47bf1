"""Content section upsert and public reads."""

import pytest

from portfolio.api.v1.endpoints.utils.content import validate_content
from portfolio.core.errors import ValidationError

HERO = {
    "title": "Hi, I'm Sam",
    "subtitle": "Full Stack Developer",
    "ctas": [{"text": "View My Work", "href": "/projects"}],
}


async def test_put_creates_section_on_first_write(test_client, auth_headers):
    resp = await test_client.put(
        "/api/admin/content/hero", headers=auth_headers, json=HERO
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["key"] == "hero"
    assert data["content"]["title"] == "Hi, I'm Sam"
    assert data["content"]["ctas"] == [{"text": "View My Work", "href": "/projects"}]

    resp = await test_client.get("/api/content/hero")
    assert resp.status_code == 200
    assert resp.json()["subtitle"] == "Full Stack Developer"


async def test_put_replaces_whole_document(test_client, auth_headers):
    await test_client.put(
        "/api/admin/content/about",
        headers=auth_headers,
        json={"summary": "First", "highlights": ["a", "b"], "motto": "ship it"},
    )
    resp = await test_client.put(
        "/api/admin/content/about",
        headers=auth_headers,
        json={"summary": "Second"},
    )
    assert resp.status_code == 200

    resp = await test_client.get("/api/content/about")
    content = resp.json()
    assert content["summary"] == "Second"
    assert content["highlights"] == []
    assert "motto" not in content


async def test_put_keeps_unknown_fields(test_client, auth_headers):
    resp = await test_client.put(
        "/api/admin/content/social",
        headers=auth_headers,
        json={"github": "https://github.com/sam", "mastodon": "https://x.social/@sam"},
    )
    assert resp.status_code == 200
    assert resp.json()["content"]["mastodon"] == "https://x.social/@sam"


async def test_put_requires_auth(test_client, db_session):
    resp = await test_client.put("/api/admin/content/hero", json=HERO)
    assert resp.status_code == 401


async def test_put_unknown_key(test_client, auth_headers):
    resp = await test_client.put(
        "/api/admin/content/pricing", headers=auth_headers, json={"plan": "free"}
    )
    assert resp.status_code == 422
    assert resp.json()["kind"] == "validation_error"


async def test_put_wrong_shape(test_client, auth_headers):
    resp = await test_client.put(
        "/api/admin/content/banners",
        headers=auth_headers,
        json={"items": [{"alt": "missing image"}]},
    )
    assert resp.status_code == 422
    body = resp.json()
    assert body["kind"] == "validation_error"
    assert any("image_url" in e for e in body["errors"])


async def test_get_missing_section(test_client, db_session):
    resp = await test_client.get("/api/content/skills")
    assert resp.status_code == 404
    assert resp.json()["kind"] == "not_found"


async def test_get_unknown_key(test_client, db_session):
    resp = await test_client.get("/api/content/nope")
    assert resp.status_code == 404


async def test_get_all_content(test_client, auth_headers):
    await test_client.put("/api/admin/content/hero", headers=auth_headers, json=HERO)
    await test_client.put(
        "/api/admin/content/backgrounds",
        headers=auth_headers,
        json={"hero": "https://img.example.com/bg.jpg"},
    )

    resp = await test_client.get("/api/content")
    assert resp.status_code == 200
    data = resp.json()
    assert set(data) == {"hero", "backgrounds"}
    assert data["backgrounds"]["hero"] == "https://img.example.com/bg.jpg"

    resp = await test_client.get("/api/admin/content", headers=auth_headers)
    assert [s["key"] for s in resp.json()] == ["backgrounds", "hero"]


def test_validate_content_fills_defaults():
    doc = validate_content("skills", {"frontend": ["React"]})
    assert doc["frontend"] == ["React"]
    assert doc["backend"] == []
    assert doc["devops"] == []


def test_validate_content_rejects_non_object():
    with pytest.raises(ValidationError):
        validate_content("hero", ["not", "an", "object"])
