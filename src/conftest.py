from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import src.config.database as database
from src.guestbook.repository import orm_models as guestbook_orm_models  # noqa: F401
from src.invitations.repository import orm_models as invitation_orm_models  # noqa: F401
from src.main import app
from src.models.base import BaseModel
from src.rsvps.repository import orm_models as rsvp_orm_models  # noqa: F401
from src.tests.inmemory_models import InMemoryDatabase

OWNER_ID = "owner-1"
OTHER_OWNER_ID = "owner-2"


@pytest.fixture
def client_factory():
    """Build an HTTP client for the app with the given dependency overrides."""

    @asynccontextmanager
    async def factory(overrides: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        try:
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                yield client
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest_asyncio.fixture
async def client(client_factory):
    async with client_factory() as test_client:
        yield test_client


@pytest.fixture
def memory_db() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def owner_headers() -> dict[str, str]:
    return {"X-Owner-Id": OWNER_ID}


@pytest_asyncio.fixture
async def sqlite_session_maker(monkeypatch):
    """Point the SQL read/write models at a fresh in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    session_maker = async_sessionmaker(engine, expire_on_commit=False)
    monkeypatch.setattr(database, "async_session_maker", session_maker)
    yield session_maker

    await engine.dispose()
