"""Public schema exports."""

from .upload import UploadResult

__all__ = ["UploadResult"]
