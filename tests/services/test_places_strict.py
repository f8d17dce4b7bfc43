"""Places Routes (strict contract) — error kinds mapped to distinct HTTP statuses.

Invariants:
    - Reads and deletes 200, creates 201
    - NotFound 404, Conflict 409, Validation 400, Authentication 401
    - Error bodies use the structured {"error": {...}} envelope
"""

from uuid import uuid4

import pytest

from app.services.place_service import PlaceService
from tests.services.auth_tokens import bearer

pytestmark = pytest.mark.usefixtures("strict_mode")


async def test_reads_return_200(client, make_user, make_place):
    u1 = await make_user()
    place = await make_place("p-1")

    assert (await client.get("/api/v1/places")).status_code == 200
    assert (await client.get(f"/api/v1/places/{place.id}")).status_code == 200
    res = await client.get("/api/v1/places/user", headers=bearer(u1.id))
    assert res.status_code == 200


async def test_add_place_returns_201_then_409(client, make_user):
    u1 = await make_user()
    payload = {"place_id": "abc123", "name": "Central Park"}

    first = await client.post("/api/v1/places", json=payload, headers=bearer(u1.id))
    second = await client.post("/api/v1/places", json=payload, headers=bearer(u1.id))

    assert first.status_code == 201
    assert second.status_code == 409
    error = second.json()["error"]
    assert error["code"] == "RELATION_EXISTS"
    assert error["category"] == "conflict"
    assert error["message"] == "User-Place relation already exists"
    assert error["context"]["user_id"] == str(u1.id)


async def test_missing_place_returns_404(client):
    res = await client.get(f"/api/v1/places/{uuid4()}")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_missing_user_returns_404(client):
    res = await client.get("/api/v1/places/user", headers=bearer(uuid4()))
    assert res.status_code == 404
    assert res.json()["error"]["message"].startswith("User ")


async def test_remove_returns_200_with_counts(client, make_place):
    place = await make_place("p-2", contents=3)

    res = await client.delete(f"/api/v1/places/{place.id}")

    assert res.status_code == 200
    assert res.json()["contents_deleted"] == 3


async def test_remove_missing_place_returns_404(client):
    res = await client.delete(f"/api/v1/places/{uuid4()}")
    assert res.status_code == 404
    assert res.json()["error"]["category"] == "resource_not_found"


async def test_invalid_payload_returns_400_with_details(client, make_user):
    u1 = await make_user()

    res = await client.post(
        "/api/v1/places",
        json={"place_id": "p-3", "latitude": 123.0},
        headers=bearer(u1.id),
    )

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(d["field"] == "body.latitude" for d in error["details"])


async def test_missing_token_returns_401_envelope(client):
    res = await client.post("/api/v1/places", json={"place_id": "p-4"})
    assert res.status_code == 401
    assert res.json()["error"]["category"] == "authentication"


async def test_concurrent_duplicate_save_returns_409(client, make_user, monkeypatch):
    u1 = await make_user()

    async def not_yet_visible(self, *_):
        return False

    monkeypatch.setattr(PlaceService, "_relation_exists", not_yet_visible)
    payload = {"place_id": "abc123"}

    await client.post("/api/v1/places", json=payload, headers=bearer(u1.id))
    res = await client.post("/api/v1/places", json=payload, headers=bearer(u1.id))

    assert res.status_code == 409
    assert res.json()["error"]["code"] == "RELATION_EXISTS"
