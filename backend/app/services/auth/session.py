"""
Session - Cookie transport for session tokens

Authentication is re-derived on every request from the auth cookie alone;
nothing is remembered between requests. Cookie attributes used to set the
cookie at login are the same ones used to clear it at logout, otherwise some
clients keep the old cookie.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from starlette.responses import Response

from app.config.settings import settings
from app.services.auth.tokens import InvalidTokenError, TokenCodec
from app.services.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = "Unauthorized: Please log in"
INVALID_TOKEN_MESSAGE = "Invalid or expired token"


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, as decoded from a verified token."""
    id: str
    email: str


def authenticate(cookies: Mapping[str, str], codec: TokenCodec, cookie_name: str = None) -> Identity:
    """
    Resolve the caller from a request's cookies.

    Raises:
        UnauthorizedError when the cookie is missing or its token does not verify
    """
    token = cookies.get(cookie_name or settings.AUTH_COOKIE_NAME)
    if not token:
        raise UnauthorizedError(MISSING_TOKEN_MESSAGE)

    try:
        claims = codec.verify(token)
    except InvalidTokenError:
        logger.warning("Rejected request with invalid or expired session token")
        raise UnauthorizedError(INVALID_TOKEN_MESSAGE)

    return Identity(id=claims.subject_id, email=claims.email)


def cookie_attributes() -> Dict[str, Any]:
    return {
        "key": settings.AUTH_COOKIE_NAME,
        "path": "/",
        "httponly": True,
        "secure": settings.is_production(),
        "samesite": settings.AUTH_COOKIE_SAMESITE.lower(),
    }


def set_auth_cookie(response: Response, token: str, max_age: int) -> None:
    response.set_cookie(value=token, max_age=max_age, **cookie_attributes())


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(**cookie_attributes())
