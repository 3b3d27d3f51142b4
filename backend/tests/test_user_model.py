# backend/tests/test_user_model.py
import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from app.models import Base, Booking, Place, User


@pytest.mark.asyncio
async def test_create_user_place_and_booking():
    """Create an in-memory SQLite DB, create tables and insert related rows."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    AsyncSessionLocal = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with AsyncSessionLocal() as session:
        user = User(name="Test User", email="owner@example.com", hashed_password="x")
        session.add(user)
        await session.flush()

        place = Place(owner_id=user.id, title="Loft")
        session.add(place)
        await session.flush()

        session.add(Booking(
            place_id=place.id, user_id=user.id,
            check_in="2026-01-01", check_out="2026-01-03",
            name="Test User", phone="555-0100",
        ))
        await session.commit()

        assert len(user.id) == 36
        assert place.photos == []
        assert place.perks == []

        booking = (await session.execute(select(Booking))).scalars().first()
        assert booking.place.title == "Loft"
        assert "hashed_password" not in user.to_public_dict()

    await engine.dispose()


def test_timestamps_are_timezone_aware_columns():
    columns = [
        User.__table__.c.created_at,
        Place.__table__.c.created_at,
        Place.__table__.c.updated_at,
        Booking.__table__.c.created_at,
    ]
    for column in columns:
        assert column.type.timezone is True
