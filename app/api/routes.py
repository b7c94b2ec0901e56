"""
FastAPI routes bridging the frontend to TikTok.
"""

from __future__ import annotations

import json
import logging
from http import HTTPStatus
from typing import Annotated, Any, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse
from starlette.datastructures import UploadFile as StarletteUploadFile

from app.clients import OAuthTokenExchangeError
from app.dependencies import (
    get_app_settings,
    get_tiktok_oauth_client,
    get_video_upload_service,
)
from app.schemas import UploadResult

router = APIRouter()
logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides the unreserved set.
_URI_COMPONENT_SAFE = "!~*'()"


def build_token_redirect_url(frontend_url: str, token_payload: Any) -> str:
    """Append the JSON-encoded token payload to ``frontend_url`` as ``token``."""
    serialized = json.dumps(token_payload, separators=(",", ":"), ensure_ascii=False)
    separator = "&" if "?" in frontend_url else "?"
    return f"{frontend_url}{separator}token={quote(serialized, safe=_URI_COMPONENT_SAFE)}"


@router.get("/", response_class=PlainTextResponse)
async def healthcheck() -> str:
    """Plain-text liveness probe."""
    return "FrameLift AI backend running"


@router.get("/login")
async def start_tiktok_oauth_flow(
    oauth_client: Annotated[Any, Depends(get_tiktok_oauth_client)],
) -> Response:
    """Send the browser to the TikTok consent screen."""
    if not oauth_client.is_configured:
        return PlainTextResponse(
            "TikTok OAuth is not configured",
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        )
    return RedirectResponse(
        url=oauth_client.build_authorization_url(),
        status_code=HTTPStatus.TEMPORARY_REDIRECT,
    )


@router.get("/on_auth")
async def handle_tiktok_oauth_callback(
    oauth_client: Annotated[Any, Depends(get_tiktok_oauth_client)],
    settings: Annotated[Any, Depends(get_app_settings)],
    code: Optional[str] = Query(None, description="Authorization code issued by TikTok."),
    state: Optional[str] = Query(None, description="Opaque state echoed by TikTok."),
):
    """
    Exchange the authorization code and hand the token back to the frontend.

    The whole token payload rides in the redirect query string, so it ends up
    in browser history and access logs.
    """
    if not code:
        return PlainTextResponse("Missing code", status_code=HTTPStatus.BAD_REQUEST)

    try:
        token_payload = await oauth_client.exchange_authorization_code(code)
    except OAuthTokenExchangeError as exc:
        logger.error("Error exchanging token: %s", exc)
        return PlainTextResponse(
            "Token exchange failed", status_code=HTTPStatus.INTERNAL_SERVER_ERROR
        )

    return RedirectResponse(
        url=build_token_redirect_url(settings.frontend_url, token_payload),
        status_code=HTTPStatus.FOUND,
    )


@router.post("/upload", response_model=UploadResult, response_model_exclude_none=True)
async def upload_video(
    request: Request,
    service: Annotated[Any, Depends(get_video_upload_service)],
):
    """
    Accept a multipart video upload, optionally alongside an access token.

    A ``video`` part that is a plain field or carries no filename counts as
    no file at all.
    """
    form = await request.form()
    video = form.get("video")
    access_token = form.get("access_token")
    if not isinstance(access_token, str):
        access_token = None

    if not isinstance(video, StarletteUploadFile) or not video.filename:
        return JSONResponse(
            status_code=HTTPStatus.BAD_REQUEST,
            content={"ok": False, "message": "No file uploaded"},
        )

    try:
        return await service.accept(video, access_token)
    except Exception:  # pylint: disable=broad-except
        logger.exception("Failed to handle uploaded video %s", video.filename)
        return JSONResponse(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            content={"ok": False, "message": "Upload failed"},
        )


__all__ = ["build_token_redirect_url", "router"]
