"""
FastAPI dependency returning the immutable settings the app was built with.
"""

from fastapi import Request

from app.core.config import AppSettings, get_settings


def get_app_settings(request: Request) -> AppSettings:
    """Return the settings bound by ``create_app``, else the process-wide ones."""
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else get_settings()


__all__ = ["get_app_settings"]
