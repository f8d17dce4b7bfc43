"""Service test fixtures — async DB, seeded rows, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - Compat mode is legacy unless a test requests the strict_mode fixture

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.config import get_settings
from app.core.domain_types import ApiCompatMode
from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.models import Content, Place, User
import app.infrastructure.database as db_module
from app.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def strict_mode(monkeypatch):
    """Serve the strict status-code contract for the duration of a test."""
    monkeypatch.setattr(get_settings(), "api_compat_mode", ApiCompatMode.STRICT)


@pytest.fixture
async def make_user(test_db):
    """Factory inserting a user row (users are owned by the identity service)."""
    async def _make(fullname: str = "Ada Lovelace", avatar_url: str | None = None) -> User:
        user = User(
            fullname=fullname,
            avatar_url=avatar_url or f"https://cdn.test/{fullname.split()[0].lower()}.png",
        )
        test_db.add(user)
        await test_db.commit()
        await test_db.refresh(user)
        return user
    return _make


@pytest.fixture
async def make_place(test_db):
    """Factory inserting a place row with optional contents."""
    async def _make(place_id: str, name: str = "Somewhere", contents: int = 0) -> Place:
        place = Place(place_id=place_id, name=name)
        test_db.add(place)
        await test_db.flush()
        for i in range(contents):
            test_db.add(Content(place_id=place.id, body=f"note {i}"))
        await test_db.commit()
        await test_db.refresh(place)
        return place
    return _make
