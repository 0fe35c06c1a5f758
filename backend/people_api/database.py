"""
People API - Database Session Management
========================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependencies.
How:   Creates an async engine with connection pooling, provides a session
       dependency that rolls back on error and always closes.
Who:   Used by the repository dependencies via FastAPI's dependency injection.
When:  Engine is created at module import; sessions are created per-request.

Connection Strategy:
    ORM repository:  one AsyncSession per request (get_db_session)
    SQL repository:  one short-lived connection per call, checked out from
                     the engine pool (get_engine)

    Repositories commit their own writes, so the session dependency does not
    commit. It only rolls back and closes.
"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from people_api.config import settings


def build_engine(database_url: str) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    Pool sizing only applies to server databases; SQLite dialects pick their
    own pool class and reject pool_size/max_overflow.
    """
    if database_url.startswith("sqlite"):
        return create_async_engine(
            database_url,
            echo=settings.log_level == "DEBUG",
        )
    return create_async_engine(
        database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
        echo=settings.log_level == "DEBUG",
    )


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: attributes stay readable after the repository commits
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


# ── Engine & Session Factory ──────────────────────────────────────────────
engine = build_engine(settings.database_url)
async_session_factory = build_session_factory(engine)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, read by Alembic for migrations and by
    create_schema() for local development and tests.
    """
    pass


# ── Dependencies ──────────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the repository (which commits each write itself)
        3. On error: rolls back anything left pending
        4. Always: closes the session (returns connection to pool)

    Raises:
        Any database exceptions are propagated to the global error handler.
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


def get_engine() -> AsyncEngine:
    """FastAPI dependency returning the shared engine (direct-SQL strategy)."""
    return engine


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_schema(bind: AsyncEngine) -> None:
    """
    Create all tables registered on Base.metadata.

    Production schemas are managed by Alembic; this is for SQLite development
    databases and the test suite.
    """
    # Model modules register themselves on Base when imported
    from people_api.models import person  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
