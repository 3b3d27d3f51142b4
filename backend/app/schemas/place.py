from typing import List, Optional
from pydantic import Field, field_validator

from app.config.constants import ADDRESS_MAX_LENGTH, TITLE_MAX_LENGTH
from app.schemas.base import CamelModel


class PlaceFields(CamelModel):
    title: Optional[str] = Field(None, max_length=TITLE_MAX_LENGTH)
    address: Optional[str] = Field(None, max_length=ADDRESS_MAX_LENGTH)
    photos: Optional[List[str]] = None
    description: Optional[str] = None
    perks: Optional[List[str]] = None
    extra_info: Optional[str] = None
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    max_guests: Optional[int] = Field(None, ge=1)
    price: Optional[float] = Field(None, ge=0)

    @field_validator("perks")
    @classmethod
    def unique_perks(cls, v):
        # Perks are a set; keep first occurrence order
        if v is None:
            return v
        return list(dict.fromkeys(v))


class PlaceCreateRequest(PlaceFields):
    pass


class PlaceUpdateRequest(PlaceFields):
    """Partial update: only the keys present in the body are merged."""
    pass


class PlaceResponse(CamelModel):
    id: str
    owner_id: str
    title: Optional[str] = None
    address: Optional[str] = None
    photos: List[str] = []
    description: Optional[str] = None
    perks: List[str] = []
    extra_info: Optional[str] = None
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    max_guests: Optional[int] = None
    price: Optional[float] = None


class PlaceCreateResponse(CamelModel):
    message: str
    place: PlaceResponse
