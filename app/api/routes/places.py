"""Places Routes — list, read, save and delete places.

Invariants:
    - Caller identity only from AuthContext (verified bearer token), never from the body
    - POST bodies validated against PlaceCreate before reaching the handler
    - Success status from status_mapping: 201 everywhere in legacy mode
    - Missing rows: null body in legacy mode, 404 in strict mode

Design Decisions:
    - /user declared before /{place_id}: literal path wins over the parameter
    - Routes shape responses with core/place_views; services return ORM rows
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_auth_context
from app.api.status_mapping import is_legacy_mode, success_status
from app.core.domain_types import AuthContext, PlaceId
from app.core.errors import ErrorContext, ResourceNotFoundError
from app.core.place_views import (
    place_row, place_with_members, user_with_places,
)
from app.infrastructure.database import get_db
from app.schemas.place import PlaceCreate
from app.services.place_service import PlaceService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/places", tags=["places"])


@router.get("")
async def get_all_places(
    response: Response, db: AsyncSession = Depends(get_db),
):
    """All places with user summaries and content ids, without created_at."""
    places = await PlaceService(db).list_places()
    response.status_code = success_status(status.HTTP_200_OK)
    return [place_with_members(p, exclude=("created_at",)) for p in places]


@router.get("/user")
async def get_places_by_user(
    response: Response,
    auth: AuthContext = Depends(get_auth_context),
    db: AsyncSession = Depends(get_db),
):
    """The caller's id with the (id, place_id) of every place they saved."""
    user = await PlaceService(db).get_user_places(auth.user_id)
    if user is None and not is_legacy_mode():
        raise ResourceNotFoundError(
            "User", str(auth.user_id), ErrorContext(user_id=str(auth.user_id)),
        )
    response.status_code = success_status(status.HTTP_200_OK)
    return user_with_places(user) if user is not None else None


@router.get("/{place_id}")
async def get_place(
    place_id: UUID, response: Response, db: AsyncSession = Depends(get_db),
):
    """One place row, no relations."""
    place = await PlaceService(db).get_place(PlaceId(place_id))
    if place is None and not is_legacy_mode():
        raise ResourceNotFoundError(
            "Place", str(place_id), ErrorContext(place_id=str(place_id)),
        )
    response.status_code = success_status(status.HTTP_200_OK)
    return place_row(place) if place is not None else None


@router.post("")
async def add_place(
    body: PlaceCreate,
    response: Response,
    auth: AuthContext = Depends(get_auth_context),
    db: AsyncSession = Depends(get_db),
):
    """Save a place for the caller; 409 (401 legacy) if already saved."""
    place = await PlaceService(db).add_place(auth, body)
    response.status_code = success_status(status.HTTP_201_CREATED)
    return place_with_members(place)


@router.delete("/{place_id}")
async def remove_place(
    place_id: UUID, response: Response, db: AsyncSession = Depends(get_db),
):
    """Delete a place with its contents and user relations."""
    removal = await PlaceService(db).remove_place(PlaceId(place_id))
    response.status_code = success_status(status.HTTP_200_OK)
    return removal.to_response()
