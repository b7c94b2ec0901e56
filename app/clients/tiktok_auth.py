"""
TikTok OAuth utilities.

Builds the consent URL and exchanges authorization codes for tokens. The token
payload is returned exactly as TikTok sends it.
"""

from __future__ import annotations

import secrets
from typing import Any
from urllib.parse import urlencode

import httpx

from app.core.config import TikTokSettings


class OAuthTokenExchangeError(Exception):
    """Raised when the token endpoint cannot be reached or rejects the code."""


class TikTokOAuthClient:
    """Build TikTok authorization URLs and exchange authorization codes."""

    AUTH_BASE_URL = "https://www.tiktok.com/v2/auth/authorize/"

    def __init__(
        self,
        settings: TikTokSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self._settings.client_key and self._settings.redirect_uri)

    def build_authorization_url(self, state: str | None = None) -> str:
        """Construct the TikTok consent URL."""
        params = {
            "client_key": self._settings.client_key or "",
            "response_type": "code",
            "scope": ",".join(self._settings.scopes),
            "redirect_uri": self._settings.redirect_uri or "",
            "state": state or secrets.token_urlsafe(16),
        }
        return f"{self.AUTH_BASE_URL}?{urlencode(params)}"

    async def exchange_authorization_code(self, code: str) -> Any:
        """
        Exchange an authorization code for an access token.

        The credentials travel as query parameters on an empty POST, which is
        what the token endpoint expects. Returns the decoded JSON payload.
        """
        params = {
            "client_key": self._settings.client_key or "",
            "client_secret": self._settings.client_secret or "",
            "code": code,
            "grant_type": "authorization_code",
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._settings.request_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(self._settings.token_url, params=params)
        except httpx.HTTPError as exc:
            raise OAuthTokenExchangeError(f"Token endpoint unreachable: {exc}") from exc

        if not response.is_success:
            raise OAuthTokenExchangeError(
                f"Token endpoint returned {response.status_code}: {response.text}"
            )

        try:
            return response.json()
        except ValueError as exc:
            raise OAuthTokenExchangeError(
                "Token endpoint returned a non-JSON payload."
            ) from exc


__all__ = ["OAuthTokenExchangeError", "TikTokOAuthClient"]
