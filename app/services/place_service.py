"""Place Service — queries behind the five places endpoints.

Invariants:
    - A UserPlace is only written when both its User and Place exist
    - At most one UserPlace per (user_id, place_id); the unique constraint decides races
    - Existing places are never updated by a repeat add_place
    - remove_place deletes contents, relations and the place in ONE transaction,
      all scoped to the requested place id

Design Decisions:
    - Find-or-create commits the Place before the relation: a place stays saved even if
      the relation turns out to be a duplicate (same observable behavior as before)
    - IntegrityError on insert → rollback + re-select (Place) or Conflict (UserPlace):
      losing a concurrent insert is not an error for the caller
    - Eager loads via selectinload; relationships are never lazy-loaded in async code
"""

import logging
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.domain_types import AuthContext, PlaceId, PlaceRemoval, UserId
from app.core.errors import (
    ErrorContext, RelationExistsError, ResourceNotFoundError,
)
from app.models.content import Content
from app.models.place import Place
from app.models.user import User
from app.models.user_place import UserPlace
from app.schemas.place import PlaceCreate

logger = logging.getLogger(__name__)

# Legacy clients match on this exact body when a delete removes nothing.
REMOVE_FAILED_BODY = {"status": "Failed"}


class PlaceService:
    """Place queries bound to one request's database session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Reads ───────────────────────────────────────────────────

    async def list_places(self) -> list[Place]:
        """All places with their users and contents loaded."""
        result = await self.db.execute(
            select(Place)
            .options(selectinload(Place.users), selectinload(Place.contents))
            .order_by(Place.created_at, Place.id),
        )
        return list(result.scalars().all())

    async def get_place(self, place_id: PlaceId) -> Place | None:
        result = await self.db.execute(
            select(Place).where(Place.id == place_id),
        )
        return result.scalar_one_or_none()

    async def get_place_with_members(self, place_id: PlaceId) -> Place | None:
        result = await self.db.execute(
            select(Place)
            .where(Place.id == place_id)
            .options(selectinload(Place.users), selectinload(Place.contents))
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def get_user_places(self, user_id: UserId) -> User | None:
        """The user row with its saved places loaded, or None."""
        result = await self.db.execute(
            select(User)
            .where(User.id == user_id)
            .options(selectinload(User.places)),
        )
        return result.scalar_one_or_none()

    # ─── Writes ──────────────────────────────────────────────────

    async def add_place(self, auth: AuthContext, payload: PlaceCreate) -> Place:
        """Save a place for the caller, creating the place on first reference.

        Raises ResourceNotFoundError when the caller has no user row and
        RelationExistsError when the place is already saved by the caller.
        """
        ctx = ErrorContext(user_id=str(auth.user_id), place_id=payload.place_id)
        if await self.db.get(User, auth.user_id) is None:
            raise ResourceNotFoundError("User", str(auth.user_id), ctx)

        place, place_created = await self._find_or_create_place(payload)
        # A rollback in _create_relation expires every loaded row
        internal_id = PlaceId(place.id)
        relation_created = await self._create_relation(auth.user_id, internal_id)
        if not relation_created:
            logger.info(
                "Place already saved by user",
                extra={"user_id": auth.user_id, "place_id": payload.place_id},
            )
            raise RelationExistsError(ctx)

        logger.info(
            f"Place saved (new place: {place_created})",
            extra={"user_id": auth.user_id, "place_id": payload.place_id},
        )
        saved = await self.get_place_with_members(internal_id)
        if saved is None:
            # Deleted by a concurrent remove_place between commit and re-read
            raise ResourceNotFoundError("Place", str(internal_id), ctx)
        return saved

    async def remove_place(self, place_id: PlaceId) -> PlaceRemoval:
        """Delete a place and everything it owns, atomically.

        Raises ResourceNotFoundError (legacy body {"status": "Failed"}) when no
        place has this id; nothing is deleted in that case.
        """
        contents = await self.db.execute(
            delete(Content).where(Content.place_id == place_id),
        )
        relations = await self.db.execute(
            delete(UserPlace).where(UserPlace.place_id == place_id),
        )
        places = await self.db.execute(
            delete(Place).where(Place.id == place_id),
        )
        if places.rowcount == 0:
            await self.db.rollback()
            raise ResourceNotFoundError(
                "Place", str(place_id),
                ErrorContext(place_id=str(place_id)),
                legacy_body=REMOVE_FAILED_BODY,
            )
        await self.db.commit()

        removal = PlaceRemoval(
            place_deleted=places.rowcount,
            contents_deleted=contents.rowcount,
            user_places_deleted=relations.rowcount,
        )
        logger.info(
            f"Place removed ({removal.contents_deleted} contents, "
            f"{removal.user_places_deleted} relations)",
            extra={"place_id": place_id},
        )
        return removal

    # ─── Find-or-create ──────────────────────────────────────────

    async def _find_place_by_external_id(self, external_id: str) -> Place | None:
        result = await self.db.execute(
            select(Place).where(Place.place_id == external_id),
        )
        return result.scalar_one_or_none()

    async def _find_or_create_place(
        self, payload: PlaceCreate,
    ) -> tuple[Place, bool]:
        place = await self._find_place_by_external_id(payload.place_id)
        if place is not None:
            return place, False

        place = Place(**payload.to_row_defaults())
        self.db.add(place)
        try:
            await self.db.commit()
        except IntegrityError:
            # Another request inserted the same place_id first
            await self.db.rollback()
            place = await self._find_place_by_external_id(payload.place_id)
            if place is None:
                raise
            return place, False
        return place, True

    async def _relation_exists(self, user_id: UUID, place_id: UUID) -> bool:
        result = await self.db.execute(
            select(UserPlace.id)
            .where(UserPlace.user_id == user_id)
            .where(UserPlace.place_id == place_id),
        )
        return result.scalar_one_or_none() is not None

    async def _create_relation(self, user_id: UUID, place_id: UUID) -> bool:
        """Insert the (user, place) row; False when it already exists."""
        if await self._relation_exists(user_id, place_id):
            return False

        self.db.add(UserPlace(user_id=user_id, place_id=place_id))
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            return False
        return True
