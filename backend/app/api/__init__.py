from fastapi import APIRouter
from app.api import auth
from app.api import media
from app.api import places
from app.api import bookings

router = APIRouter()


@router.get("/health")
async def health():
    return {"status": "ok"}


# Include auth, media, places, bookings routers
router.include_router(auth.router)
router.include_router(media.router)
router.include_router(places.router)
router.include_router(bookings.router)
