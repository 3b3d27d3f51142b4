from typing import Any, Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.models.place import Place

# Columns a request body may change; owner_id and id are never among them
EDITABLE_FIELDS = (
    "title",
    "address",
    "photos",
    "description",
    "perks",
    "extra_info",
    "check_in",
    "check_out",
    "max_guests",
    "price",
)

LIST_FIELDS = ("photos", "perks")


class PlaceService:
    """Find / insert / update-by-id operations on places."""

    @staticmethod
    async def get_by_id(db: AsyncSession, place_id: str) -> Optional[Place]:
        result = await db.execute(select(Place).where(Place.id == place_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def list_all(db: AsyncSession) -> List[Place]:
        result = await db.execute(select(Place).order_by(Place.created_at))
        return result.scalars().all()

    @staticmethod
    async def list_by_owner(db: AsyncSession, owner_id: str) -> List[Place]:
        result = await db.execute(
            select(Place).where(Place.owner_id == owner_id).order_by(Place.created_at)
        )
        return result.scalars().all()

    @staticmethod
    async def create(db: AsyncSession, owner_id: str, data: Dict[str, Any]) -> Place:
        fields = {k: v for k, v in data.items() if k in EDITABLE_FIELDS}
        place = Place(owner_id=owner_id, **fields)
        db.add(place)
        await db.commit()
        await db.refresh(place)
        return place

    @staticmethod
    async def update(db: AsyncSession, place: Place, changes: Dict[str, Any]) -> Place:
        """Merge the given fields into the place; absent fields are left untouched."""
        for key, value in changes.items():
            if key not in EDITABLE_FIELDS:
                continue
            if key in LIST_FIELDS and value is None:
                value = []
            setattr(place, key, value)
        await db.commit()
        await db.refresh(place)
        return place


place_service = PlaceService()
