"""
FastAPI application entrypoint for the FrameLift backend.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from app.api.routes import router as api_router
from app.core.config import AppSettings, get_settings
from app.core.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Factory for the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    missing = settings.missing_required()
    if missing:
        logger.warning(
            "Missing TikTok configuration: %s. OAuth exchange will fail until set.",
            ", ".join(missing),
        )

    app = FastAPI(
        title="FrameLift AI Backend",
        version="0.1.0",
        description="TikTok OAuth code exchange and video upload intake.",
    )
    app.include_router(api_router)
    app.state.settings = settings
    return app


app = create_app()


def main() -> None:
    import uvicorn

    settings = get_settings()
    logger.info("FrameLift backend running on port %s", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())


__all__ = ["app", "create_app", "main"]


if __name__ == "__main__":  # pragma: no cover - script entry point
    main()
