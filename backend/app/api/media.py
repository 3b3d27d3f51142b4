"""
Media API - Photo ingestion endpoints

Both endpoints require an authenticated caller.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, File, UploadFile

from app.api.deps import get_current_identity, get_media_ingestor
from app.schemas.media import UploadByLinkRequest, UploadByLinkResponse, UploadPhotosResponse
from app.services.auth import Identity
from app.services.media import MediaIngestor

router = APIRouter()


@router.post("/upload-by-link", response_model=UploadByLinkResponse)
async def upload_by_link(
    request: UploadByLinkRequest,
    identity: Identity = Depends(get_current_identity),
    ingestor: MediaIngestor = Depends(get_media_ingestor),
):
    filename = await ingestor.ingest_link(request.link)
    return UploadByLinkResponse(filename=filename)


@router.post("/upload-photos", response_model=UploadPhotosResponse)
async def upload_photos(
    photos: Optional[List[UploadFile]] = File(None),
    identity: Identity = Depends(get_current_identity),
    ingestor: MediaIngestor = Depends(get_media_ingestor),
):
    uploaded = await ingestor.ingest_uploads(photos)
    return UploadPhotosResponse(uploaded_photos=uploaded)
