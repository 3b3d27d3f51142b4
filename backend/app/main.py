"""
Stays Backend - Main Application

This is the entry point for the FastAPI application.
It handles:
- REST API endpoints (auth, media, places, bookings)
- Static serving of ingested photos under /uploads
"""
from contextlib import asynccontextmanager
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api import router as api_router
from app.api.errors import register_exception_handlers
from app.config.constants import UPLOADS_URL_PREFIX
from app.config.settings import settings
from app.models.database import init_db

# Configure logging
logging.basicConfig(level=logging.DEBUG if settings.DEBUG else logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Creates the tables and the uploads directory before serving.
    """
    # === STARTUP ===
    logger.info("🚀 Starting Stays Backend...")

    await init_db()
    logger.info("✅ Database tables created")

    os.makedirs(settings.UPLOADS_DIR, exist_ok=True)
    logger.info(f"✅ Uploads directory ready: {settings.UPLOADS_DIR}")

    yield  # Application runs here

    # === SHUTDOWN ===
    logger.info("🛑 Shutting down...")


app = FastAPI(
    title="Stays Backend",
    description="Listings and bookings with cookie sessions and photo ingestion",
    version="1.0.0",
    lifespan=lifespan
)

# CORS configuration (credentials needed for the auth cookie)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include REST API routes
app.include_router(api_router)

# Ingested photos
app.mount(
    UPLOADS_URL_PREFIX,
    StaticFiles(directory=settings.UPLOADS_DIR, check_dir=False),
    name="uploads",
)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Stays",
        "version": "1.0.0",
        "status": "running"
    }
