import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from robot_logs import __version__
from robot_logs.api import create_api_router
from robot_logs.core.config import Settings, get_settings
from robot_logs.core.logging import setup_logging
from robot_logs.infrastructure.database import Database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    database: Database = app.state.database
    if settings.database.create_tables:
        await database.create_all()
    logger.info("Server started on %s:%s (%s)", settings.host, settings.port, settings.environment)
    try:
        yield
    finally:
        await database.dispose()
        logger.info("Server stopped")


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        description="Robot telemetry log ingestion and query API",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings.database, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size)

    app.include_router(create_api_router())

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run("robot_logs.main:app", host=settings.host, port=settings.port, reload=settings.server.reload)


if __name__ == "__main__":
    run()
