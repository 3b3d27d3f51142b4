"""
Schemas Package

Pydantic models for API requests and responses.
"""

from app.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    UserResponse,
    MessageResponse,
)
from app.schemas.place import (
    PlaceCreateRequest,
    PlaceUpdateRequest,
    PlaceResponse,
    PlaceCreateResponse,
)
from app.schemas.booking import (
    BookingCreateRequest,
    BookingResponse,
    BookingWithPlaceResponse,
)
from app.schemas.media import (
    UploadByLinkRequest,
    UploadByLinkResponse,
    UploadPhotosResponse,
)

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "MessageResponse",
    "PlaceCreateRequest",
    "PlaceUpdateRequest",
    "PlaceResponse",
    "PlaceCreateResponse",
    "BookingCreateRequest",
    "BookingResponse",
    "BookingWithPlaceResponse",
    "UploadByLinkRequest",
    "UploadByLinkResponse",
    "UploadPhotosResponse",
]
