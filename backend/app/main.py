"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.infrastructure.database import engine
from app.infrastructure.database.bootstrap import create_schema, ensure_database_exists
from app.infrastructure.logging.log_config import setup_logging
from app.presentation.api.errors import register_exception_handlers
from app.presentation.api.v1.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    setup_logging(settings)

    await ensure_database_exists(settings.database_url)
    await create_schema(engine)
    logger.info("%s %s started (%s)", settings.app_title, settings.app_version, settings.app_env)

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Build the FastAPI application: CORS, error envelope, /api/v1 routes."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8020, reload=True)
