"""Intake for uploaded videos.

Videos are staged on disk for the lifetime of one request. Forwarding to the
TikTok content API is not wired up yet, so every accepted file is discarded
once the response is decided.
"""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import anyio
from fastapi import UploadFile

from app.schemas.upload import UploadResult

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 1024 * 1024

DEMO_MESSAGE = "Demo upload accepted (no TikTok call)"
RECEIVED_MESSAGE = (
    "File received. In production this would be uploaded to TikTok (demo mode)."
)


@asynccontextmanager
async def staged_upload(upload: UploadFile, directory: Path) -> AsyncIterator[Path]:
    """Write ``upload`` under ``directory`` and remove it on exit, whatever happens."""
    await anyio.Path(directory).mkdir(parents=True, exist_ok=True)
    suffix = Path(upload.filename or "").suffix
    path = directory / f"{uuid.uuid4().hex}{suffix}"
    try:
        async with await anyio.open_file(path, "wb") as handle:
            while chunk := await upload.read(_CHUNK_SIZE):
                await handle.write(chunk)
        yield path
    finally:
        await anyio.Path(path).unlink(missing_ok=True)


class VideoUploadService:
    """Accept a video upload and decide between demo and received responses."""

    def __init__(self, *, upload_dir: Path) -> None:
        self._upload_dir = upload_dir

    async def accept(self, upload: UploadFile, access_token: str | None) -> UploadResult:
        async with staged_upload(upload, self._upload_dir) as path:
            size = (await anyio.Path(path).stat()).st_size
            if not access_token:
                logger.info(
                    "No access_token provided; accepting %s (%d bytes) in demo mode",
                    upload.filename,
                    size,
                )
                return UploadResult(ok=True, demo=True, message=DEMO_MESSAGE)

            # TODO: forward to the TikTok content posting API (init upload,
            # PUT the bytes to the returned upload_url, then poll publish status).
            logger.info("Received %s (%d bytes) with access token", upload.filename, size)
            return UploadResult(ok=True, message=RECEIVED_MESSAGE)


__all__ = [
    "DEMO_MESSAGE",
    "RECEIVED_MESSAGE",
    "VideoUploadService",
    "staged_upload",
]
