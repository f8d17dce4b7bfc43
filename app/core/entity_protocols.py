"""Entity Protocols — structural contracts for rows handed to the pure view layer.

Invariants:
    - Core NEVER imports from models/ — dependency arrows point inward only
    - ORM models satisfy these protocols structurally (no inheritance)

Design Decisions:
    - Protocol over ABC: structural subtyping, unit tests can pass SimpleNamespace rows
"""

from datetime import datetime
from typing import Protocol, Sequence
from uuid import UUID


class ContentLike(Protocol):
    id: UUID


class UserLike(Protocol):
    id: UUID
    fullname: str
    avatar_url: str | None


class PlaceLike(Protocol):
    """A persisted place row, optionally with users/contents loaded."""
    id: UUID
    place_id: str
    name: str | None
    address: str | None
    latitude: float | None
    longitude: float | None
    image_url: str | None
    created_at: datetime
    updated_at: datetime | None


class PlaceWithMembersLike(PlaceLike, Protocol):
    users: Sequence[UserLike]
    contents: Sequence[ContentLike]


class UserWithPlacesLike(Protocol):
    id: UUID
    places: Sequence[PlaceLike]
