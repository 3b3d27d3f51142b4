"""
Auth Service - Registration and credential checks

Hashing is CPU-bound, so it runs in the threadpool rather than on the event
loop. Login failures use one message whether the email is unknown or the
password is wrong.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from app.models.user import User
from app.services.auth import hash_password, verify_password
from app.services.exceptions import UnauthorizedError
from app.services.user_service import user_service

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class AuthService:

    async def register(self, db: AsyncSession, name: str, email: str, password: str) -> User:
        hashed = await run_in_threadpool(hash_password, password)
        user = await user_service.create(db, name=name, email=email, hashed_password=hashed)
        logger.info(f"Registered user {user.id}")
        return user

    async def login(self, db: AsyncSession, email: str, password: str) -> User:
        user = await user_service.get_by_email(db, email)
        if not user:
            logger.warning("Login failed: unknown email")
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        matches = await run_in_threadpool(verify_password, password, user.hashed_password)
        if not matches:
            logger.warning(f"Login failed: bad password for user {user.id}")
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        return user


auth_service = AuthService()
