"""Service layer exports."""

from .video_upload import VideoUploadService, staged_upload

__all__ = ["VideoUploadService", "staged_upload"]
