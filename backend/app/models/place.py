"""
Place Model - Property listings

The owner is fixed at creation from the authenticated identity and is never
taken from request bodies. `photos` keeps filenames produced by media
ingestion, in display order.
"""
from sqlalchemy import Column, String, DateTime, Integer, Float, Text, JSON, ForeignKey
from datetime import datetime, UTC
import uuid

from .database import Base


class Place(Base):
    """Listing owned by a single user"""
    __tablename__ = "places"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Owner (immutable after creation)
    owner_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)

    title = Column(String(255), nullable=True)
    address = Column(String(500), nullable=True)
    photos = Column(JSON, default=list, nullable=False)
    description = Column(Text, nullable=True)
    perks = Column(JSON, default=list, nullable=False)
    extra_info = Column(Text, nullable=True)
    check_in = Column(String(32), nullable=True)
    check_out = Column(String(32), nullable=True)
    max_guests = Column(Integer, nullable=True)
    price = Column(Float, nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), onupdate=lambda: datetime.now(UTC))

    def __repr__(self):
        return f"<Place {self.id[:8]} owner={self.owner_id[:8]}>"
