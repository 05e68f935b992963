"""Service test fixtures — async in-memory DB, real Storage Port adapters, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Services run on a FakeClock pinned to 2025-03-01 09:30 UTC
    - The client talks to app with app.state.services swapped for the test container

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares one connection,
      so tables created by the fixture are visible to the repositories
    - db_manager built via __new__: skips PostgreSQL pool arguments SQLite rejects
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

import expense_tracker.models  # noqa: F401
from expense_tracker.api.dependencies import build_services
from expense_tracker.db.base import Base
from expense_tracker.infrastructure.database import DatabaseSessionManager
from expense_tracker.main import app
from expense_tracker.schemas.category import CategoryRequest


START = datetime(2025, 3, 1, 9, 30, tzinfo=timezone.utc)


class FakeClock:
    """Controllable now/today pair for the services."""

    def __init__(self, current: datetime = START):
        self.current = current

    def now(self) -> datetime:
        return self.current

    def today(self):
        return self.current.date()

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    return manager


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def services(db_manager, clock):
    return build_services(db_manager, today=clock.today, now=clock.now)


@pytest.fixture
def category_service(services):
    return services.categories


@pytest.fixture
def expense_service(services):
    return services.expenses


@pytest.fixture
async def client(services):
    """FastAPI test client wired to the test service container."""
    original = getattr(app.state, "services", None)
    app.state.services = services

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.services = original


@pytest.fixture
async def food_category(category_service):
    """A stored 'Food' category."""
    return await category_service.create(
        CategoryRequest(name="Food", description="Groceries and eating out"),
    )
