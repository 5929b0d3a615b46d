"""Shared test fixtures: a throwaway SQLite database per test."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

import ama.models  # noqa: F401
from ama.database import Base, get_db
from ama.main import app
from ama.services.sessions import create_session, publish


@pytest.fixture
async def engine(tmp_path) -> AsyncEngine:
    """File-backed SQLite so independent sessions can race each other."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'ama_test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncSession:
    async with session_factory() as session:
        yield session


@pytest.fixture
async def draft_ama(db_session):
    """Unpublished AMA."""
    return await create_session(db_session, "Topic A", "All about A")


@pytest.fixture
async def published_ama(db_session, draft_ama):
    return await publish(db_session, draft_ama, draft_ama.host_token)


@pytest.fixture
async def client(session_factory):
    """HTTP client against the app, with get_db pointed at the test database."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
