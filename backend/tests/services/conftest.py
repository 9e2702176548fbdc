"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness check sees the test engine
    - memory_repo gives ledger tests a store with no database at all

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (row locks are a no-op there; PostgreSQL-specific behavior not exercised)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from beerstock.core.domain_types import BeerType
from beerstock.db.base import Base
from beerstock.infrastructure.database import get_db, DatabaseSessionManager
from beerstock.models.beer import Beer
from beerstock.schemas.beer import BeerCreate
from beerstock.services.beer_ledger import BeerLedger
import beerstock.infrastructure.database as db_module
from beerstock.main import app

from tests.services.fake_beer_repository import InMemoryBeerRepository


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
def beer_payload() -> dict:
    return {
        "name": "Brahma", "brand": "Ambev", "max": 50,
        "quantity": 10, "type": "LAGER",
    }


@pytest.fixture
def beer_create(beer_payload) -> BeerCreate:
    return BeerCreate(**beer_payload)


@pytest.fixture
def memory_repo() -> InMemoryBeerRepository:
    return InMemoryBeerRepository()


@pytest.fixture
def ledger(memory_repo) -> BeerLedger:
    return BeerLedger(memory_repo)


@pytest.fixture
async def seed_beer(test_db):
    """Insert a beer directly into the test DB."""
    beer = Beer(
        name="Brahma", brand="Ambev", type=BeerType.LAGER, quantity=10, max=50,
    )
    test_db.add(beer)
    await test_db.commit()
    await test_db.refresh(beer)
    return beer
