"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, PlaceId wrap UUIDs — internal primary keys, never the external place_id
    - All valid modes encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and parse from env vars without custom code
    - AuthContext frozen: handlers receive it explicitly, nothing mutates the request
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
PlaceId = NewType("PlaceId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class ApiCompatMode(str, Enum):
    """Response contract served to clients."""
    LEGACY = "legacy"   # 201 for every success, 401 for every failure
    STRICT = "strict"   # status derived from the error category


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class AuthContext:
    """Verified caller identity, produced by the auth dependency."""
    user_id: UserId


@dataclass(frozen=True)
class PlaceRemoval:
    """Row counts from one transactional place deletion."""
    place_deleted: int
    contents_deleted: int
    user_places_deleted: int

    def to_response(self) -> dict:
        return {
            "status": "Success",
            "place_deleted": self.place_deleted,
            "contents_deleted": self.contents_deleted,
            "user_places_deleted": self.user_places_deleted,
        }
