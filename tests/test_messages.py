"""Contact form submission and admin message handling."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest


async def test_submit_contact(test_client, db_session):
    resp = await test_client.post(
        "/api/contact",
        json={
            "name": "Jane Visitor",
            "email": "jane@example.com",
            "subject": "Project inquiry",
            "message": "Can we talk?",
        },
    )
    assert resp.status_code == 201
    data = resp.json()
    assert data["message_id"]
    assert data["email"] == "jane@example.com"
    assert data["created_at"]


@pytest.mark.parametrize(
    "payload,field",
    [
        ({"email": "jane@example.com", "message": "hi"}, "name"),
        ({"name": "Jane", "email": "not-an-email", "message": "hi"}, "email"),
        ({"name": "Jane", "email": "jane@example.com", "message": "  "}, "message"),
    ],
    ids=["missing-name", "bad-email", "blank-message"],
)
async def test_submit_contact_validation(test_client, db_session, payload, field):
    resp = await test_client.post("/api/contact", json=payload)
    assert resp.status_code == 422
    body = resp.json()
    assert body["kind"] == "validation_error"
    assert any(e.startswith(field) for e in body["errors"])


async def test_list_messages_requires_auth(test_client, message_factory):
    await message_factory()
    resp = await test_client.get("/api/admin/messages")
    assert resp.status_code == 401


async def test_list_messages_newest_first(test_client, auth_headers, message_factory):
    now = datetime.now(timezone.utc)
    await message_factory(subject="old", created_at=now - timedelta(days=2))
    await message_factory(subject="new", created_at=now)
    await message_factory(subject="middle", created_at=now - timedelta(days=1))

    resp = await test_client.get("/api/admin/messages", headers=auth_headers)
    assert resp.status_code == 200
    assert [m["subject"] for m in resp.json()] == ["new", "middle", "old"]


async def test_get_message(test_client, auth_headers, message_factory):
    msg = await message_factory(subject="Hello there")

    resp = await test_client.get(
        f"/api/admin/messages/{msg.message_id}", headers=auth_headers
    )
    assert resp.status_code == 200
    assert resp.json()["subject"] == "Hello there"


async def test_delete_message_twice(test_client, auth_headers, message_factory):
    msg = await message_factory()

    resp = await test_client.delete(
        f"/api/admin/messages/{msg.message_id}", headers=auth_headers
    )
    assert resp.status_code == 200
    assert resp.json()["success"] is True

    resp = await test_client.delete(
        f"/api/admin/messages/{msg.message_id}", headers=auth_headers
    )
    assert resp.status_code == 404
    assert resp.json()["kind"] == "not_found"


async def test_get_missing_message(test_client, auth_headers):
    resp = await test_client.get(f"/api/admin/messages/{uuid4()}", headers=auth_headers)
    assert resp.status_code == 404
