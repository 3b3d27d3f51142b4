"""
Places API - Listings

Endpoints for:
- Creating a place (owner taken from the session)
- Updating a place (owner only)
- Listing all places / the caller's places
- Reading a single place (public)
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_identity
from app.models.database import get_db
from app.schemas.place import (
    PlaceCreateRequest,
    PlaceCreateResponse,
    PlaceResponse,
    PlaceUpdateRequest,
)
from app.services.auth import Action, Decision, Identity, ResourceKind, authorize, can_access
from app.services.exceptions import NotFoundError
from app.services.place_service import place_service

router = APIRouter()


@router.post("/places", response_model=PlaceCreateResponse, status_code=201)
async def create_place(
    req: PlaceCreateRequest,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    authorize(identity, ResourceKind.PLACE, Action.CREATE)
    place = await place_service.create(db, owner_id=identity.id, data=req.model_dump(exclude_none=True))
    return PlaceCreateResponse(
        message="Place saved successfully!",
        place=PlaceResponse.model_validate(place),
    )


@router.get("/user-places", response_model=List[PlaceResponse])
async def list_user_places(
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    places = await place_service.list_by_owner(db, identity.id)
    return [
        PlaceResponse.model_validate(p)
        for p in places
        if can_access(identity, ResourceKind.PLACE, Action.LIST_MINE, p) is Decision.ALLOW
    ]


@router.get("/places", response_model=List[PlaceResponse])
async def list_places(
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    authorize(identity, ResourceKind.PLACE, Action.LIST_ALL)
    places = await place_service.list_all(db)
    return [PlaceResponse.model_validate(p) for p in places]


@router.get("/places/{place_id}", response_model=PlaceResponse)
async def get_place(place_id: str, db: AsyncSession = Depends(get_db)):
    place = await place_service.get_by_id(db, place_id)
    if not place:
        raise NotFoundError("Place not found")
    return PlaceResponse.model_validate(place)


@router.put("/places/{place_id}", response_model=PlaceResponse)
async def update_place(
    place_id: str,
    req: PlaceUpdateRequest,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    place = await place_service.get_by_id(db, place_id)
    if not place:
        raise NotFoundError("Place not found")
    authorize(identity, ResourceKind.PLACE, Action.UPDATE, place)

    updated = await place_service.update(db, place, req.model_dump(exclude_unset=True))
    return PlaceResponse.model_validate(updated)
