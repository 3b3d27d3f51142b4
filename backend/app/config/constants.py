"""
Application-wide constants for configuration and tuning.

Environment-dependent settings (DB, secrets, directories, limits) belong in
settings.py. This file is for operational parameters that rarely change
between environments.
"""

# ==============================================================================
# DATABASE CONNECTION POOL
# ==============================================================================

# SQLAlchemy connection pool size
DB_POOL_SIZE: int = 10

# SQLAlchemy max overflow connections
DB_POOL_MAX_OVERFLOW: int = 20

# ==============================================================================
# MEDIA INGESTION
# ==============================================================================

# Extension given to images fetched by link (remote names are never trusted)
LINK_IMAGE_EXTENSION: str = ".jpg"

# Extensions accepted for direct uploads
ALLOWED_IMAGE_EXTENSIONS: frozenset[str] = frozenset(
    {".jpg", ".jpeg", ".png", ".gif", ".webp"}
)

# Content-type prefix required for direct uploads
IMAGE_CONTENT_TYPE_PREFIX: str = "image/"

# Read/write chunk size for streaming media to disk (bytes)
MEDIA_CHUNK_SIZE: int = 1024 * 1024

# URL prefix under which the uploads directory is served
UPLOADS_URL_PREFIX: str = "/uploads"

# ==============================================================================
# VALIDATION CONSTRAINTS
# ==============================================================================

# Full name validation
NAME_MIN_LENGTH: int = 1
NAME_MAX_LENGTH: int = 255

# Email validation
EMAIL_MAX_LENGTH: int = 255

# Password validation
PASSWORD_MIN_LENGTH: int = 1

# Place title/address
TITLE_MAX_LENGTH: int = 255
ADDRESS_MAX_LENGTH: int = 500
