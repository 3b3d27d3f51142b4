"""
User Model - Registered identities

Key Fields:
- `email`: Unique login handle, compared exactly as stored (case-sensitive)
- `hashed_password`: Salted one-way hash; the plaintext is never persisted
"""
from sqlalchemy import Column, String, DateTime
from datetime import datetime, UTC
import uuid

from .database import Base


class User(Base):
    """User model for authentication and profile"""
    __tablename__ = "users"

    # Primary key
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Authentication / profile
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)

    def to_public_dict(self):
        """Convert to public dictionary (no credential material)"""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
        }

    def __repr__(self):
        return f"<User {self.email or self.id[:8]}>"
