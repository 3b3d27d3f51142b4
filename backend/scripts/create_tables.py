import asyncio
from app.models.database import init_db
from app.models.user import User  # noqa: F401
from app.models.place import Place  # noqa: F401
from app.models.booking import Booking  # noqa: F401


async def create_tables():
    """Create all database tables"""
    print("Creating database tables...")
    print("Tables to create:")
    print("  - users")
    print("  - places")
    print("  - bookings")

    await init_db()

    print("✅ All tables created successfully!")


if __name__ == "__main__":
    asyncio.run(create_tables())
