"""
Booking Service - Record and list reservations

Bookings are stored first-come-first-served: no availability or date-overlap
check is made against existing bookings of the same place.
"""
from typing import Any, Dict, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.models.booking import Booking

BOOKING_FIELDS = (
    "place_id",
    "check_in",
    "check_out",
    "number_of_guests",
    "name",
    "phone",
    "price",
)


class BookingService:

    @staticmethod
    async def create(db: AsyncSession, user_id: str, data: Dict[str, Any]) -> Booking:
        fields = {k: v for k, v in data.items() if k in BOOKING_FIELDS}
        booking = Booking(user_id=user_id, **fields)
        db.add(booking)
        await db.commit()
        await db.refresh(booking)
        return booking

    @staticmethod
    async def list_by_user(db: AsyncSession, user_id: str) -> List[Booking]:
        """User's bookings with their place loaded in the same query."""
        result = await db.execute(
            select(Booking).where(Booking.user_id == user_id).order_by(Booking.created_at)
        )
        return result.scalars().all()


booking_service = BookingService()
