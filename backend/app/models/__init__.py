"""
Database Models Package

This module exports all SQLAlchemy models for the stays API.

Tables:
1. users - Registered identities
2. places - Listings owned by users
3. bookings - Reservations of places
"""

from .database import (
    engine,
    AsyncSessionLocal,
    Base,
    init_db,
    get_db,
)

from .user import User
from .place import Place
from .booking import Booking

__all__ = [
    # Database utilities
    "engine",
    "AsyncSessionLocal",
    "Base",
    "init_db",
    "get_db",

    # Models
    "User",
    "Place",
    "Booking",
]
