from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from recruit360.exceptions import DatasetUnavailableError
from recruit360.logging_utils import get_logger, setup_logging

from backend.app.config import get_settings
from backend.app.routers import clubs, conferences, email, geocode, health, programs

logger = get_logger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
    )
    app.include_router(health.router)
    app.include_router(conferences.router)
    app.include_router(programs.router)
    app.include_router(clubs.router)
    app.include_router(geocode.router)
    app.include_router(email.router)

    @app.exception_handler(DatasetUnavailableError)
    async def dataset_unavailable_handler(request: Request, exc: DatasetUnavailableError):
        # Only reached when the bundled snapshot is unreadable too.
        logger.error("Dataset unavailable for %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=503,
            content={"detail": "Program data is temporarily unavailable. Please retry."},
        )

    logger.info("Created %s (dataset: %s)", settings.api_title, "database" if settings.db_url else "snapshot")
    return app


app = create_app()
