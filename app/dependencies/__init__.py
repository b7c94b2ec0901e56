"""Expose dependency helpers for FastAPI routers."""

from .clients import get_tiktok_oauth_client, get_video_upload_service
from .config import get_app_settings

__all__ = [
    "get_app_settings",
    "get_tiktok_oauth_client",
    "get_video_upload_service",
]
