from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from station_api.config import Settings, settings as default_settings
from station_api.database import Database
from station_api.errors import StationApiError
from station_api.routers.stations import router as stations_router
from station_api.sync import StationSynchronizer

logger = logging.getLogger(__name__)


async def error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception("%s %s failed", request.method, request.url.path, exc_info=exc)
    return PlainTextResponse(str(exc), status_code=500)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title="Gas Station API")
    app.state.database = Database(settings.database_url)
    app.state.synchronizer = StationSynchronizer(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StationApiError, error_handler)
    app.add_exception_handler(Exception, error_handler)
    app.include_router(stations_router)

    @app.get("/health")
    async def health_check() -> dict:
        return {"status": "ok"}

    @app.on_event("startup")
    async def startup_event() -> None:
        if not settings.source_verify_tls:
            logger.warning(
                "TLS certificate verification is disabled for %s", settings.source_url
            )
        await app.state.database.init_db()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        await app.state.database.dispose()

    return app


app = create_app()
