"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - dependency_overrides cleared after every test

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (ILIKE compiles to lower() LIKE lower() on SQLite)
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from httpx import ASGITransport, AsyncClient

from person_api.db.base import Base
from person_api.db.session import create_session_factory
from person_api.infrastructure.database import get_db, DatabaseSessionManager
from person_api.models.company import Company
from person_api.models.person import Person
import person_api.infrastructure.database as db_module
from person_api.main import app


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
    return create_session_factory(test_engine)


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
async def seed_company(test_db):
    """Insert a company that people can reference."""
    company = Company(name="Acme Corp", email="hello@acme.test")
    test_db.add(company)
    await test_db.commit()
    await test_db.refresh(company)
    return company


@pytest.fixture
def seed_people(test_db, seed_company):
    """Insert people with strictly increasing created timestamps.

    Returns an async callable: await seed_people(["Alice", "Bob"]).
    The last name in the list is the newest.
    """
    base = datetime(2026, 1, 1, tzinfo=timezone.utc)

    async def _seed(names: list[str], company_id: str | None = None) -> list[Person]:
        people = [
            Person(
                name=name,
                company_id=company_id or str(seed_company.id),
                created=base + timedelta(minutes=i),
            )
            for i, name in enumerate(names)
        ]
        test_db.add_all(people)
        await test_db.commit()
        return people

    return _seed
