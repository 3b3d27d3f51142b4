from typing import List, Optional
from pydantic import BaseModel

from app.schemas.base import CamelModel


class UploadByLinkRequest(BaseModel):
    link: Optional[str] = None


class UploadByLinkResponse(BaseModel):
    filename: str


class UploadPhotosResponse(CamelModel):
    uploaded_photos: List[str]
