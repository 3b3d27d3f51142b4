"""
Media Package

Photo ingestion by link or multipart upload into the local uploads directory.
"""

from .naming import FilenameGenerator, filename_generator
from .ingestion import MediaIngestor, media_ingestor, upload_extension

__all__ = [
    "FilenameGenerator",
    "filename_generator",
    "MediaIngestor",
    "media_ingestor",
    "upload_extension",
]
