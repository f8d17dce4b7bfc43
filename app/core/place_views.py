"""Place Views — pure shaping of persisted rows into JSON-ready dicts.

Invariants:
    - Only allow-listed attributes leave the service (no join-table columns)
    - User summaries expose exactly fullname, avatar_url, id
    - Content summaries expose exactly id
    - Pure: no IO, no ORM imports, deterministic for the same input
"""

from typing import Iterable

from app.core.entity_protocols import (
    ContentLike, PlaceLike, PlaceWithMembersLike, UserLike, UserWithPlacesLike,
)

PLACE_FIELDS = (
    "id", "place_id", "name", "address", "latitude", "longitude",
    "image_url", "created_at", "updated_at",
)
USER_SUMMARY_FIELDS = ("fullname", "avatar_url", "id")
CONTENT_SUMMARY_FIELDS = ("id",)
USER_PLACE_FIELDS = ("id", "place_id")


def _pick(row: object, fields: Iterable[str]) -> dict:
    return {name: getattr(row, name) for name in fields}


def place_row(place: PlaceLike, exclude: Iterable[str] = ()) -> dict:
    """Bare place columns, minus any excluded attribute names."""
    skipped = set(exclude)
    return _pick(place, (f for f in PLACE_FIELDS if f not in skipped))


def user_summary(user: UserLike) -> dict:
    return _pick(user, USER_SUMMARY_FIELDS)


def content_summary(content: ContentLike) -> dict:
    return _pick(content, CONTENT_SUMMARY_FIELDS)


def place_with_members(
    place: PlaceWithMembersLike, exclude: Iterable[str] = (),
) -> dict:
    """Place columns plus embedded user and content summaries."""
    view = place_row(place, exclude)
    view["users"] = [user_summary(u) for u in place.users]
    view["contents"] = [content_summary(c) for c in place.contents]
    return view


def user_with_places(user: UserWithPlacesLike) -> dict:
    """User id plus the (id, place_id) pairs of every saved place."""
    return {
        "id": user.id,
        "places": [_pick(p, USER_PLACE_FIELDS) for p in user.places],
    }
