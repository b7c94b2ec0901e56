"""Pytest configuration shared across the suite."""

try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover
    import _bootstrap  # type: ignore # noqa: F401

import httpx
import pytest

from app.core.config import AppSettings, TikTokSettings
from app.main import create_app


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO-powered tests to run against asyncio backend only."""
    return "asyncio"


@pytest.fixture
def tiktok_settings() -> TikTokSettings:
    return TikTokSettings(
        client_key="test-client-key",
        client_secret="test-client-secret",
        redirect_uri="https://api.example.com/on_auth",
    )


@pytest.fixture
def app_settings(tmp_path, tiktok_settings) -> AppSettings:
    return AppSettings(
        frontend_url="https://app.example.com/connected",
        upload_dir=tmp_path / "uploads",
        tiktok=tiktok_settings,
    )


@pytest.fixture
def api_app(app_settings):
    return create_app(app_settings)


@pytest.fixture
async def api_client(api_app):
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=api_app), base_url="http://testserver"
    ) as client:
        yield client
