"""
Media Ingestion - Photos by link and by upload

Both entry points store files under one fixed uploads directory using
server-generated names and return those names for embedding in
`Place.photos`. Client-supplied names never reach the filesystem; only the
extension of an uploaded file is kept, after checking it against an
allow-list.

Network and disk I/O are async (httpx / aiofiles) so a slow download never
stalls other requests. Downloads are single-shot and bounded by a timeout.
A failed ingestion leaves no file behind.
"""
import asyncio
import logging
import os
from pathlib import Path, PurePosixPath
from typing import List, Optional, Sequence
from urllib.parse import urlsplit

import aiofiles
import aiofiles.os
import httpx
from fastapi import UploadFile

from app.config.constants import (
    ALLOWED_IMAGE_EXTENSIONS,
    IMAGE_CONTENT_TYPE_PREFIX,
    LINK_IMAGE_EXTENSION,
    MEDIA_CHUNK_SIZE,
)
from app.config.settings import settings
from app.services.exceptions import DownloadError, UploadTooLargeError, ValidationError
from app.services.media.naming import FilenameGenerator, filename_generator

logger = logging.getLogger(__name__)

INVALID_LINK_MESSAGE = "Link must be an http(s) URL"


def upload_extension(filename: Optional[str]) -> str:
    """Lower-cased extension of a client filename, ignoring any path parts."""
    if not filename:
        return ""
    base = PurePosixPath(filename.replace("\\", "/")).name
    return PurePosixPath(base).suffix.lower()


class MediaIngestor:
    """Stores remote or uploaded images under generated names."""

    def __init__(
        self,
        uploads_dir: str = None,
        max_bytes: int = None,
        max_files: int = None,
        timeout: float = None,
        naming: FilenameGenerator = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.uploads_dir = Path(uploads_dir or settings.UPLOADS_DIR)
        self.max_bytes = max_bytes if max_bytes is not None else settings.MAX_UPLOAD_BYTES
        self.max_files = max_files if max_files is not None else settings.MAX_UPLOAD_FILES
        self.timeout = timeout if timeout is not None else settings.DOWNLOAD_TIMEOUT_SEC
        self.naming = naming or filename_generator
        self._transport = transport

    # === By link ===

    async def ingest_link(self, link: Optional[str]) -> str:
        """
        Download an image and store it under a fresh `.jpg` name.

        Raises:
            ValidationError: link missing or not an absolute http(s) URL
            UploadTooLargeError: remote body exceeds the byte limit
            DownloadError: network failure or non-success status
        """
        link = (link or "").strip()
        if not link:
            raise ValidationError("Link is required")
        try:
            parts = urlsplit(link)
        except ValueError as e:
            raise ValidationError(INVALID_LINK_MESSAGE) from e
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValidationError(INVALID_LINK_MESSAGE)

        await aiofiles.os.makedirs(self.uploads_dir, exist_ok=True)
        filename = self.naming.next_name(LINK_IMAGE_EXTENSION)
        path = self.uploads_dir / filename

        try:
            written = await self._download(link, path)
        except FileExistsError as e:
            # Another process owns this name; leave its file alone
            raise DownloadError() from e
        except httpx.InvalidURL as e:
            raise ValidationError(INVALID_LINK_MESSAGE) from e
        except httpx.HTTPError as e:
            await self._discard(path)
            logger.error(f"Download of {parts.netloc} failed: {type(e).__name__}: {e}")
            raise DownloadError() from e
        except (Exception, asyncio.CancelledError):
            await self._discard(path)
            raise

        logger.info(f"Ingested link from {parts.netloc} as {filename} ({written} bytes)")
        return filename

    async def _download(self, link: str, path: Path) -> int:
        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            async with client.stream("GET", link) as response:
                response.raise_for_status()

                declared = response.headers.get("content-length")
                if declared and declared.isdigit() and int(declared) > self.max_bytes:
                    raise UploadTooLargeError()

                written = 0
                async with aiofiles.open(path, "xb") as out:
                    async for chunk in response.aiter_bytes(MEDIA_CHUNK_SIZE):
                        written += len(chunk)
                        if written > self.max_bytes:
                            raise UploadTooLargeError()
                        await out.write(chunk)

        if written == 0:
            raise DownloadError("Downloaded image is empty")
        return written

    # === By upload ===

    async def ingest_uploads(self, files: Optional[Sequence[UploadFile]]) -> List[str]:
        """
        Store a batch of uploaded images, keeping their receive order.

        Every part is checked before anything is written; if a part fails
        while being written, the files already stored for this batch are removed.
        """
        files = [f for f in (files or []) if f is not None and f.filename]
        if not files:
            raise ValidationError("No files uploaded")
        if len(files) > self.max_files:
            raise ValidationError(f"At most {self.max_files} files can be uploaded at once")

        extensions = []
        for upload in files:
            ext = upload_extension(upload.filename)
            if ext not in ALLOWED_IMAGE_EXTENSIONS:
                raise ValidationError(f"Unsupported file type: {ext or 'none'}")
            content_type = (upload.content_type or "").lower()
            if not content_type.startswith(IMAGE_CONTENT_TYPE_PREFIX):
                raise ValidationError("Only image uploads are accepted")
            extensions.append(ext)

        await aiofiles.os.makedirs(self.uploads_dir, exist_ok=True)

        stored: List[str] = []
        try:
            for upload, ext in zip(files, extensions):
                filename = self.naming.next_name(ext)
                async with aiofiles.open(self.uploads_dir / filename, "xb") as out:
                    # Only names this batch actually created are rolled back
                    stored.append(filename)
                    await self._copy_upload(upload, out)
        except (Exception, asyncio.CancelledError):
            for filename in stored:
                await self._discard(self.uploads_dir / filename)
            raise

        logger.info(f"Ingested {len(stored)} uploaded photo(s)")
        return stored

    async def _copy_upload(self, upload: UploadFile, out) -> None:
        written = 0
        while chunk := await upload.read(MEDIA_CHUNK_SIZE):
            written += len(chunk)
            if written > self.max_bytes:
                raise UploadTooLargeError()
            await out.write(chunk)

    async def _discard(self, path: Path) -> None:
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.error(f"Could not remove partial media {os.fspath(path)}: {e}")


media_ingestor = MediaIngestor()
