"""Fixtures for integration tests.

Each test gets a fresh in-memory SQLite database (aiosqlite) shared through a
StaticPool with foreign keys enforced, and a FastAPI app whose session
dependency is overridden to use it.  Requests go through httpx.AsyncClient
over ASGITransport, so the app, the sessions, and the test all run on the
same event loop.
"""

import httpx
import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import src.infrastructure.persistence.models  # noqa: F401
from src.api.main import create_app
from src.infrastructure.database import Base, get_session


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(session_factory):
    app = create_app()

    async def _override_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = _override_session
    return app


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def villa_payload():
    def _payload(**overrides):
        payload = {
            "name": "Pool View",
            "details": "Overlooks the pool",
            "rate": 200.0,
            "occupancy": 4,
            "sqft": 550,
            "imageUrl": "https://example.com/pool.png",
            "amenity": ["wifi", "pool"],
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture
def create_villa(client, villa_payload):
    async def _create(**overrides):
        response = await client.post("/villas", json=villa_payload(**overrides))
        assert response.status_code == 201, response.text
        return response.json()

    return _create
