"""Place ORM — a named location, uniquely keyed externally by place_id.

Invariants:
    - id is UUID primary key (internal); place_id is the unique external key
    - created_at set on insert, never exposed by the place listing
    - Not deleted when the last user relation goes away (explicit delete only)

Design Decisions:
    - users relationship is viewonly over user_places: rows in the join table are
      written through the UserPlace model so the unique constraint stays the single guard
    - No ORM cascade to contents: deletion runs as explicit statements in one transaction
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Float, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Place(Base):
    """Place entity — shared by every user who saved it."""
    __tablename__ = "places"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    place_id: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    users: Mapped[list["User"]] = relationship(
        "User", secondary="user_places",
        viewonly=True, order_by="User.id",
    )
    contents: Mapped[list["Content"]] = relationship(
        "Content", back_populates="place", order_by="Content.id",
    )
