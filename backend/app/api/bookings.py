"""
Bookings API - Reservations scoped to the caller
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_identity
from app.models.database import get_db
from app.schemas.booking import BookingCreateRequest, BookingResponse, BookingWithPlaceResponse
from app.services.auth import Action, Decision, Identity, ResourceKind, authorize, can_access
from app.services.booking_service import booking_service
from app.services.exceptions import NotFoundError
from app.services.place_service import place_service

router = APIRouter()


@router.post("/bookings", response_model=BookingResponse, status_code=201)
async def create_booking(
    req: BookingCreateRequest,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    authorize(identity, ResourceKind.BOOKING, Action.CREATE)
    if not await place_service.get_by_id(db, req.place_id):
        raise NotFoundError("Place not found")

    booking = await booking_service.create(db, user_id=identity.id, data=req.model_dump())
    return BookingResponse.model_validate(booking)


@router.get("/bookings", response_model=List[BookingWithPlaceResponse])
async def list_bookings(
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    bookings = await booking_service.list_by_user(db, identity.id)
    return [
        BookingWithPlaceResponse.model_validate(b)
        for b in bookings
        if can_access(identity, ResourceKind.BOOKING, Action.LIST_MINE, b) is Decision.ALLOW
    ]
