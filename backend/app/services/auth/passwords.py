"""
Password Hasher

Salted one-way hashing backed by passlib. Every call to `hash_password`
draws a fresh salt, so hashing the same plaintext twice yields two different
stored values that both verify.
"""
import logging

from passlib.context import CryptContext

from app.config.settings import settings
from app.services.exceptions import InternalError

logger = logging.getLogger(__name__)


def build_context(scheme: str = settings.PASSWORD_HASH_SCHEME, rounds: int = settings.PASSWORD_HASH_ROUNDS) -> CryptContext:
    options = {}
    if scheme == "bcrypt":
        options["bcrypt__rounds"] = rounds
    return CryptContext(schemes=[scheme], deprecated="auto", **options)


pwd_context = build_context()


def hash_password(password: str) -> str:
    try:
        return pwd_context.hash(password)
    except Exception as e:
        # Never log the plaintext; the exception type is enough to diagnose
        logger.error(f"Password hashing failed: {type(e).__name__}")
        raise InternalError() from e


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not plain_password or not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Unrecognised hash format
        logger.warning("Stored password hash could not be identified")
        return False
