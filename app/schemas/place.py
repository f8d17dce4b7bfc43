"""Place Schemas — allow-listed request payloads for the places endpoints.

Invariants:
    - PlaceCreate.place_id: 1-255 chars, stripped, non-empty
    - Only declared fields reach storage (extra="forbid")
    - latitude within [-90, 90], longitude within [-180, 180]

Design Decisions:
    - Explicit field struct over spreading the raw body into ORM defaults:
      callers cannot set id, created_at or any column added later
    - field_validator for side-effect-free transforms (strip) — keeps models pure
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlaceCreate(BaseModel):
    """Place submitted by a user — also the defaults for a newly created row."""
    model_config = ConfigDict(extra="forbid")

    place_id: str = Field(min_length=1, max_length=255)
    name: str | None = Field(None, max_length=255)
    address: str | None = Field(None, max_length=500)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    image_url: str | None = Field(None, max_length=1000)

    @field_validator("place_id")
    @classmethod
    def strip_place_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("place_id cannot be empty or whitespace")
        return v

    def to_row_defaults(self) -> dict:
        """Column values for a new Place row."""
        return self.model_dump()
