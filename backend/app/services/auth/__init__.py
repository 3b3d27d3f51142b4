"""
Auth Package

Password hashing, session tokens, cookie-based sessions and the ownership
policy table.
"""

from .passwords import hash_password, verify_password
from .tokens import TokenCodec, TokenClaims, InvalidTokenError
from .session import (
    Identity,
    authenticate,
    set_auth_cookie,
    clear_auth_cookie,
)
from .policy import (
    ResourceKind,
    Action,
    Decision,
    can_access,
    authorize,
)

__all__ = [
    "hash_password",
    "verify_password",
    "TokenCodec",
    "TokenClaims",
    "InvalidTokenError",
    "Identity",
    "authenticate",
    "set_auth_cookie",
    "clear_auth_cookie",
    "ResourceKind",
    "Action",
    "Decision",
    "can_access",
    "authorize",
]
