from typing import Optional
from pydantic import AliasChoices, Field

from app.schemas.base import CamelModel
from app.schemas.place import PlaceResponse


class BookingCreateRequest(CamelModel):
    # Older clients send the place id as "place"
    place_id: str = Field(..., validation_alias=AliasChoices("place", "placeId", "place_id"))
    check_in: str
    check_out: str
    number_of_guests: Optional[int] = Field(None, ge=1)
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    price: Optional[float] = Field(None, ge=0)


class BookingResponse(CamelModel):
    id: str
    place_id: str
    user_id: str
    check_in: str
    check_out: str
    number_of_guests: Optional[int] = None
    name: str
    phone: str
    price: Optional[float] = None


class BookingWithPlaceResponse(BookingResponse):
    place: Optional[PlaceResponse] = None
