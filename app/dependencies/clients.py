"""
Factory functions to provide clients and services as FastAPI dependencies.

Both factories depend on ``get_app_settings`` so overriding the settings in
tests flows through to the constructed objects.
"""

from fastapi import Depends

from app.clients import TikTokOAuthClient
from app.core.config import AppSettings
from app.dependencies.config import get_app_settings
from app.services import VideoUploadService


def get_tiktok_oauth_client(
    settings: AppSettings = Depends(get_app_settings),
) -> TikTokOAuthClient:
    """Provide a TikTok OAuth client bound to the configured credentials."""
    return TikTokOAuthClient(settings.tiktok)


def get_video_upload_service(
    settings: AppSettings = Depends(get_app_settings),
) -> VideoUploadService:
    """Provide the video intake service staging files under ``upload_dir``."""
    return VideoUploadService(upload_dir=settings.upload_dir)


__all__ = ["get_tiktok_oauth_client", "get_video_upload_service"]
