"""Schemas returned by the video upload endpoint."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class UploadResult(BaseModel):
    """Outcome of a video upload request."""

    ok: bool = Field(..., description="Whether the upload was accepted.")
    demo: Optional[bool] = Field(
        None, description="Set when the upload ran without an access token."
    )
    message: str


__all__ = ["UploadResult"]
