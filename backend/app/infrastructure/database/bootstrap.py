"""Startup helpers: make sure the database and its tables exist."""

import logging

import asyncpg
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine

from app.infrastructure.database.base import Base

logger = logging.getLogger(__name__)


async def ensure_database_exists(database_url: str) -> None:
    """Issue ``CREATE DATABASE`` on a PostgreSQL server when the target is missing.

    Connects to the ``postgres`` maintenance database of the same server.
    Other backends (SQLite creates its file on first connect) are left alone.
    """
    url = make_url(database_url)
    if url.get_backend_name() != "postgresql" or not url.database:
        return

    maintenance = url.set(drivername="postgresql", database="postgres")
    try:
        conn = await asyncpg.connect(maintenance.render_as_string(hide_password=False))
    except (OSError, asyncpg.PostgresError) as exc:
        logger.warning("Could not reach PostgreSQL to check '%s': %s", url.database, exc)
        return

    try:
        exists = await conn.fetchval("SELECT 1 FROM pg_database WHERE datname = $1", url.database)
        if exists:
            logger.debug("Database '%s' already exists", url.database)
            return
        # CREATE DATABASE cannot run inside a transaction block
        await conn.execute(f'CREATE DATABASE "{url.database}"')
        logger.info("Created database '%s'", url.database)
    finally:
        await conn.close()


async def create_schema(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready (%d tables)", len(Base.metadata.tables))
