"""User ORM — account rows owned by the identity service.

Invariants:
    - id matches the `sub` claim of verified bearer tokens
    - This service reads users; it never creates or updates them
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class User(Base):
    """User entity — saves places through UserPlace rows."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    fullname: Mapped[str] = mapped_column(String(255), nullable=False)
    avatar_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    places: Mapped[list["Place"]] = relationship(
        "Place", secondary="user_places",
        viewonly=True, order_by="[Place.created_at, Place.id]",
    )
