"""
Token Codec - Signed, expiring session tokens

Tokens are compact JWTs carrying the subject id and email plus absolute
issue/expiry times. The codec never tells its caller *why* a token was
rejected: bad signature, malformed structure, missing claims and elapsed
expiry all surface as the same `InvalidTokenError`.

The signing secret is handed to the codec at construction, so every test can
build an isolated codec with its own secret and clock.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, UTC
from typing import Callable, Optional

from jose import jwt, JWTError


class InvalidTokenError(Exception):
    """Raised for any token that must not be trusted"""
    pass


@dataclass(frozen=True)
class TokenClaims:
    subject_id: str
    email: str
    issued_at: int
    expires_at: int


def utc_now() -> datetime:
    return datetime.now(UTC)


class TokenCodec:
    """Issues and verifies session tokens under a single secret."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=1),
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock or utc_now

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, subject_id: str, email: str) -> str:
        issued_at = int(self._clock().timestamp())
        expires_at = issued_at + int(self._ttl.total_seconds())
        to_encode = {
            "sub": str(subject_id),
            "email": email,
            "iat": issued_at,
            "exp": expires_at,
        }
        return jwt.encode(to_encode, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        if not token:
            raise InvalidTokenError()
        try:
            # Expiry is checked below against the injected clock
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            raise InvalidTokenError() from e

        subject_id = payload.get("sub")
        email = payload.get("email")
        issued_at = payload.get("iat")
        expires_at = payload.get("exp")
        if not subject_id or not isinstance(email, str):
            raise InvalidTokenError()
        if not isinstance(issued_at, int) or not isinstance(expires_at, int):
            raise InvalidTokenError()

        if self._clock().timestamp() >= expires_at:
            raise InvalidTokenError()

        return TokenClaims(
            subject_id=subject_id,
            email=email,
            issued_at=issued_at,
            expires_at=expires_at,
        )
