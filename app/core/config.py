"""
Application configuration models and helpers.

Settings are read from the environment once per process and frozen, so the
route handlers receive a single immutable configuration object through
FastAPI dependencies.
"""

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Optional

import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


def _load_env_file(path: str = ".env") -> None:
    """Best-effort load key=value pairs from a .env file into the environment."""
    env_path = Path(path)
    if not env_path.exists():
        return
    for raw_line in env_path.read_text().splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        if not key or key in os.environ:
            continue
        cleaned = value.strip().strip('"').strip("'")
        os.environ[key] = cleaned


_load_env_file()


class TikTokSettings(BaseSettings):
    """Credentials and endpoints for the TikTok OAuth integration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    client_key: Optional[str] = Field(None, validation_alias="TIKTOK_CLIENT_KEY")
    client_secret: Optional[str] = Field(None, validation_alias="TIKTOK_CLIENT_SECRET")
    redirect_uri: Optional[str] = Field(
        None,
        validation_alias="TIKTOK_REDIRECT_URI",
        description="Callback registered with TikTok, e.g. https://host/on_auth.",
    )
    token_url: str = Field(
        "https://open-api.tiktok.com/oauth/access_token/",
        validation_alias="TIKTOK_TOKEN_URL",
    )
    scopes: Annotated[tuple[str, ...], NoDecode] = Field(
        ("user.info.basic", "video.upload"),
        validation_alias="TIKTOK_SCOPES",
    )
    request_timeout_seconds: float = Field(
        10.0,
        validation_alias="TIKTOK_REQUEST_TIMEOUT",
        description="Upper bound for outbound calls to the TikTok API.",
    )

    @field_validator("scopes", mode="before")
    @classmethod
    def _split_scopes(
        cls, value: str | tuple[str, ...] | list[str]
    ) -> tuple[str, ...]:
        """Support providing scopes as a comma-separated string."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(value)
        return tuple(scope.strip() for scope in value.split(",") if scope.strip())


class AppSettings(BaseSettings):
    """Root settings object for the FastAPI application."""

    model_config = SettingsConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    environment: str = Field("development", validation_alias="APP_ENV")
    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")
    port: int = Field(3000, validation_alias="PORT")
    frontend_url: str = Field(
        "/",
        validation_alias="FRONTEND_URL",
        description="Base URL the OAuth callback redirects back to.",
    )
    upload_dir: Path = Field(
        Path("/tmp/uploads"),
        validation_alias="UPLOAD_DIR",
        description="Directory where uploaded videos are staged during a request.",
    )
    tiktok: TikTokSettings = Field(default_factory=TikTokSettings)

    def missing_required(self) -> list[str]:
        """Return the environment variables for credentials that are unset."""
        required = {
            "TIKTOK_CLIENT_KEY": self.tiktok.client_key,
            "TIKTOK_CLIENT_SECRET": self.tiktok.client_secret,
            "TIKTOK_REDIRECT_URI": self.tiktok.redirect_uri,
        }
        return [name for name, value in required.items() if not value]


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()


__all__ = [
    "AppSettings",
    "TikTokSettings",
    "get_settings",
]
