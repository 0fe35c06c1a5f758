"""
People API - Repositories Package
=================================

What:  Persistence adapters for Person records.
How:   PersonRepository (base.py) is the contract; orm.py and sql.py are the two
       interchangeable strategies. build_person_repository() picks one by name.

Strategy Inventory:
    - "orm": PersonRepositoryORM, SQLAlchemy session + before_flush auditing
    - "sql": PersonRepositorySQL, parameterized text() statements per call
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from people_api.repositories.base import PersonRepository
from people_api.repositories.orm import PersonRepositoryORM
from people_api.repositories.sql import PersonRepositorySQL
from people_api.services.audit import AuditInterceptor

PERSON_STORE_BACKENDS = ("orm", "sql")


def build_person_repository(
    backend: str,
    *,
    session: AsyncSession,
    engine: AsyncEngine,
    interceptor: AuditInterceptor,
) -> PersonRepository:
    """Instantiate the named strategy with its per-request resources."""
    if backend == "orm":
        return PersonRepositoryORM(session, interceptor)
    if backend == "sql":
        return PersonRepositorySQL(engine, interceptor)
    raise ValueError(
        f"Unknown person store backend '{backend}'. Must be one of: {PERSON_STORE_BACKENDS}"
    )


__all__ = [
    "PERSON_STORE_BACKENDS",
    "PersonRepository",
    "PersonRepositoryORM",
    "PersonRepositorySQL",
    "build_person_repository",
]
