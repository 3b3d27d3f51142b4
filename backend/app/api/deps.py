from datetime import timedelta
from functools import lru_cache
from fastapi import Depends, Request

from app.config.settings import settings
from app.services.auth import Identity, TokenCodec, authenticate
from app.services.media import MediaIngestor, media_ingestor

@lru_cache(maxsize=1)
def get_token_codec() -> TokenCodec:
    """Process-wide codec built once from configuration."""
    return TokenCodec(
        secret=settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        ttl=timedelta(minutes=settings.JWT_EXP_MINUTES),
    )


def get_media_ingestor() -> MediaIngestor:
    return media_ingestor


async def get_current_identity(
    request: Request,
    codec: TokenCodec = Depends(get_token_codec),
) -> Identity:
    """
    Session dependency: verify the auth cookie and attach the caller to
    `request.state.identity`.

    Raises UnauthorizedError (401) before the handler runs when the cookie is
    missing or its token is invalid or expired.
    """
    identity = authenticate(request.cookies, codec)
    request.state.identity = identity
    return identity
