import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

import src.config.database as database


@pytest.mark.asyncio
async def test_health_check(client):
    """Test the health check endpoint returns healthy status."""
    response = await client.get("/healthz/")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "0.1.0"


@pytest.mark.asyncio
async def test_root_endpoint(client):
    """Test the root endpoint returns welcome message."""
    response = await client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Welcome to the Wedding Invitations API"


@pytest.mark.asyncio
async def test_database_health_check(client, sqlite_session_maker):
    response = await client.get("/healthz/db")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "reachable"}


@pytest.mark.asyncio
async def test_database_health_check_reports_unreachable_store(client, monkeypatch):
    engine = create_async_engine("sqlite+aiosqlite:////nonexistent-dir/wedding.db")
    monkeypatch.setattr(
        database, "async_session_maker", async_sessionmaker(engine, expire_on_commit=False)
    )

    response = await client.get("/healthz/db")

    assert response.status_code == 503
    assert "detail" in response.json()
    await engine.dispose()
