"""Auth Dependency — bearer token verification for caller-scoped endpoints.

Invariants:
    - Missing, malformed, expired or wrongly signed tokens → AuthenticationError
    - Token subject must be a UUID
    - Caller id comes only from the token, never from the payload
"""

from datetime import timedelta
from uuid import uuid4

import pytest

from app.api.dependencies import decode_subject
from app.core.errors import AuthenticationError
from tests.services.auth_tokens import make_token


def test_decode_subject_returns_user_id():
    user_id = uuid4()
    assert decode_subject(make_token(user_id)) == user_id


def test_decode_subject_rejects_expired_token():
    token = make_token(uuid4(), expires_in=timedelta(seconds=-30))
    with pytest.raises(AuthenticationError, match="token expired"):
        decode_subject(token)


def test_decode_subject_rejects_foreign_signature():
    token = make_token(uuid4(), secret="another-secret-that-is-at-least-32-bytes")
    with pytest.raises(AuthenticationError, match="invalid token"):
        decode_subject(token)


def test_decode_subject_rejects_non_uuid_subject():
    with pytest.raises(AuthenticationError, match="not a user id"):
        decode_subject(make_token("alice"))


def test_decode_subject_rejects_garbage():
    with pytest.raises(AuthenticationError):
        decode_subject("not.a.jwt")


async def test_missing_header_is_401(client):
    res = await client.get("/api/v1/places/user")
    assert res.status_code == 401
    assert res.json()["name"] == "AUTHENTICATION_FAILED"


async def test_non_bearer_scheme_is_401(client):
    res = await client.get(
        "/api/v1/places/user", headers={"Authorization": "Basic dXNlcjpwYXNz"},
    )
    assert res.status_code == 401


async def test_expired_token_is_401(client, make_user):
    u1 = await make_user()
    token = make_token(u1.id, expires_in=timedelta(seconds=-30))

    res = await client.get(
        "/api/v1/places/user", headers={"Authorization": f"Bearer {token}"},
    )

    assert res.status_code == 401
    assert "expired" in res.json()["message"]


async def test_payload_cannot_choose_user(client, make_user):
    u1 = await make_user("Ada Lovelace")
    u2 = await make_user("Grace Hopper")

    res = await client.post(
        "/api/v1/places",
        json={"place_id": "p-1", "user_id": str(u2.id)},
        headers={"Authorization": f"Bearer {make_token(u1.id)}"},
    )

    assert res.status_code == 401
    assert res.json()["name"] == "VALIDATION_ERROR"
