"""
Booking Model - Stays reserved by users

No uniqueness or overlap constraint exists on (place_id, check_in, check_out):
two bookings may cover the same dates for the same place.
"""
from sqlalchemy import Column, String, DateTime, Integer, Float, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime, UTC
import uuid

from .database import Base


class Booking(Base):
    """Reservation of a place by a user"""
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    place_id = Column(String(36), ForeignKey('places.id', ondelete='CASCADE'), nullable=False, index=True)

    # Booker (immutable after creation)
    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)

    check_in = Column(String(32), nullable=False)
    check_out = Column(String(32), nullable=False)
    number_of_guests = Column(Integer, nullable=True)
    name = Column(String(255), nullable=False)
    phone = Column(String(32), nullable=False)
    price = Column(Float, nullable=True)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)

    place = relationship("Place", lazy="joined")

    def __repr__(self):
        return f"<Booking {self.id[:8]} place={self.place_id[:8]}>"
