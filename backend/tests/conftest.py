"""
People API - Test Configuration (conftest.py)
=============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    clock ─────────────┐
    interceptor ───────┤
    db_engine ─────────┼── orm_repository / sql_repository / repository[orm|sql]
    session_factory ───┘
    test_client[orm|sql]   HTTPX AsyncClient against create_app() with overrides
    admin_headers / user_headers   Authorization headers with signed tokens

Every test gets its own SQLite file under tmp_path, so tests never share rows.
"""

import os
import tempfile
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock

# Must be set before people_api is imported: settings and the engine are
# created at import time.
os.environ["DATABASE_URL"] = (
    "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(prefix="people_api_test_"), "app.db")
)
os.environ["JWT_SECRET"] = "test-secret-that-is-long-enough-for-hs256"
os.environ["PERSON_STORE_BACKEND"] = "orm"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from people_api.clock import Clock
from people_api.database import build_engine, build_session_factory, create_schema
from people_api.repositories import PersonRepositoryORM, PersonRepositorySQL
from people_api.security import create_access_token
from people_api.services.audit import AuditInterceptor
from people_api.services.people_service import PeopleService

T1 = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock(Clock):
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = T1):
        self.current = start
        self.calls = 0

    def now(self) -> datetime:
        self.calls += 1
        return self.current

    def advance(self, **kwargs) -> datetime:
        self.current = self.current + timedelta(**kwargs)
        return self.current


# ══════════════════════════════════════════════════════════════════════════
# Clock & Auditing
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def clock_factory():
    """For tests that need more than one independent clock."""
    return FakeClock


@pytest.fixture
def interceptor(clock):
    return AuditInterceptor(clock)


# ══════════════════════════════════════════════════════════════════════════
# Database
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """Fresh SQLite database with the People table created."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'people.db'}")
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return build_session_factory(db_engine)


# ══════════════════════════════════════════════════════════════════════════
# Repositories
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def orm_repository(session_factory, interceptor):
    async with session_factory() as session:
        yield PersonRepositoryORM(session, interceptor)


@pytest.fixture
def sql_repository(db_engine, interceptor):
    return PersonRepositorySQL(db_engine, interceptor)


@pytest_asyncio.fixture(params=["orm", "sql"])
async def repository(request, session_factory, db_engine, interceptor):
    """Runs the test once per repository strategy."""
    if request.param == "orm":
        async with session_factory() as session:
            yield PersonRepositoryORM(session, interceptor)
    else:
        yield PersonRepositorySQL(db_engine, interceptor)


@pytest.fixture
def mock_repository():
    """PersonRepository stand-in with every method as an AsyncMock."""
    repo = AsyncMock()
    repo.get = AsyncMock(return_value=None)
    repo.get_all = AsyncMock(return_value=[])
    repo.add = AsyncMock()
    repo.update = AsyncMock()
    repo.delete = AsyncMock()
    return repo


@pytest.fixture
def mock_people_service(mock_repository):
    return PeopleService(mock_repository)


# ══════════════════════════════════════════════════════════════════════════
# HTTP
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def admin_headers():
    token = create_access_token("alice", roles=["admin"])
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_access_token("bob", roles=["reader"])
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(params=["orm", "sql"])
def app(request, session_factory, db_engine, clock):
    """
    Application wired to the per-test database and fake clock.

    Overrides:
        get_db_session → sessions from the test engine
        get_engine     → the test engine
        get_clock      → the FakeClock fixture
    """
    from people_api.database import get_db_session, get_engine
    from people_api.dependencies import get_clock
    from people_api.main import create_app

    application = create_app(person_store_backend=request.param)

    async def override_db_session() -> AsyncGenerator:
        async with session_factory() as session:
            yield session

    application.dependency_overrides[get_db_session] = override_db_session
    application.dependency_overrides[get_engine] = lambda: db_engine
    application.dependency_overrides[get_clock] = lambda: clock
    return application


@pytest_asyncio.fixture
async def test_client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
