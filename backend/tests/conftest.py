import asyncio
import os
import sys
import tempfile
from pathlib import Path

import httpx
import pytest

# Add project root (2 levels up from tests/) to sys.path so tests can import 'app'
root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

# Settings are read at import time, so pin them before anything imports 'app'
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")
os.environ.setdefault("UPLOADS_DIR", tempfile.mkdtemp(prefix="stays-uploads-"))

# Use pbkdf2_sha256 for tests so they don't depend on the bcrypt C extension
from passlib.context import CryptContext
import app.services.auth.passwords as passwords

passwords.pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from app.api.deps import get_media_ingestor
from app.main import app
from app.models.database import Base, get_db
from app.services.media import FilenameGenerator, MediaIngestor
from tests.helpers import IMAGE_BYTES


@pytest.fixture
def async_db(tmp_path):
    """Point the app at a fresh SQLite file for one test.

    NullPool opens a new connection per checkout, so the TestClient's event
    loop never reuses a connection created on another loop.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        echo=False,
        poolclass=NullPool,
    )
    session_factory = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def _init():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(_init())

    async def _get_test_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    yield session_factory
    app.dependency_overrides.pop(get_db, None)
    asyncio.run(engine.dispose())


@pytest.fixture
def client(async_db):
    return TestClient(app)


@pytest.fixture
def make_client(async_db):
    """Factory for extra clients, each with its own cookie jar."""
    return lambda: TestClient(app)


def image_host(request: httpx.Request) -> httpx.Response:
    if request.url.path.startswith("/missing"):
        return httpx.Response(404, text="not found")
    if request.url.host == "unreachable.invalid":
        raise httpx.ConnectError("name resolution failed", request=request)
    return httpx.Response(200, content=IMAGE_BYTES, headers={"content-type": "image/jpeg"})


@pytest.fixture
def uploads_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def ingestor(uploads_dir):
    ingestor = MediaIngestor(
        uploads_dir=str(uploads_dir),
        max_bytes=1024,
        max_files=3,
        timeout=2.0,
        naming=FilenameGenerator(),
        transport=httpx.MockTransport(image_host),
    )
    app.dependency_overrides[get_media_ingestor] = lambda: ingestor
    yield ingestor
    app.dependency_overrides.pop(get_media_ingestor, None)
