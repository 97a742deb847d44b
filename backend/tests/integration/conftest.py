"""Shared fixtures: a throwaway SQLite database per test."""

from functools import partial

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event

from app.infrastructure.database import Base
from app.infrastructure.database.session import build_engine, build_session_factory, get_db_session
from app.infrastructure.database.unit_of_work import SQLAlchemyUnitOfWork
from app.infrastructure.dependencies import get_unit_of_work_factory
from app.main import app


@pytest_asyncio.fixture
async def engine(tmp_path):
    test_engine = build_engine(f"sqlite:///{tmp_path}/charity.db")
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def uow_factory(session_factory):
    return partial(SQLAlchemyUnitOfWork, session_factory)


@pytest.fixture
def captured_sql(engine):
    """Collect every statement sent to the database while the test runs."""
    statements: list[str] = []

    def _capture(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(engine.sync_engine, "before_cursor_execute", _capture)
    yield statements
    event.remove(engine.sync_engine, "before_cursor_execute", _capture)


@pytest_asyncio.fixture
async def client(session_factory, uow_factory):
    """HTTP client whose requests run against the per-test database."""

    async def _session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _session
    app.dependency_overrides[get_unit_of_work_factory] = lambda: uow_factory
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
    app.dependency_overrides.clear()
