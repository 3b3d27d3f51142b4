import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.models.user import User
from app.services.exceptions import ConflictError

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "Email already in use"


class UserService:
    """
    Service for centralized User retrieval and management.
    Eliminates duplicated select(User) queries across the app.
    """

    @staticmethod
    async def get_by_id(db: AsyncSession, user_id: str) -> Optional[User]:
        """
        Get user by ID.
        Returns None if not found (caller handles 404).
        """
        result = await db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> Optional[User]:
        """
        Get user by email, compared exactly as stored.
        """
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    @staticmethod
    async def create(db: AsyncSession, name: str, email: str, hashed_password: str) -> User:
        """
        Insert a new user.

        Raises:
            ConflictError if the email is already registered, including when a
            concurrent registration wins the race to the unique constraint
        """
        if await UserService.get_by_email(db, email):
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

        user = User(name=name, email=email, hashed_password=hashed_password)
        db.add(user)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            logger.info("Registration lost race on unique email constraint")
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE)
        await db.refresh(user)
        return user


user_service = UserService()
