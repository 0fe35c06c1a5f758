"""
People API - Dependency Wiring
==============================

What:  FastAPI dependencies that assemble the persistence stack per request.
How:   clock → AuditInterceptor → PersonRepository (strategy from app.state)
       → PeopleService. Route functions only ask for the PeopleService.
Who:   Used by routes/people.py; overridden in tests via app.dependency_overrides.

Lifetimes:
    Clock, AuditInterceptor    shared (stateless)
    AsyncSession               per request (get_db_session)
    Repository, PeopleService  per request
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from people_api.clock import Clock, system_clock
from people_api.database import get_db_session, get_engine
from people_api.repositories import build_person_repository
from people_api.repositories.base import PersonRepository
from people_api.services.audit import AuditInterceptor
from people_api.services.people_service import PeopleService


def get_clock() -> Clock:
    return system_clock


def get_audit_interceptor(clock: Clock = Depends(get_clock)) -> AuditInterceptor:
    return AuditInterceptor(clock)


def get_person_repository(
    request: Request,
    session: AsyncSession = Depends(get_db_session),
    engine: AsyncEngine = Depends(get_engine),
    interceptor: AuditInterceptor = Depends(get_audit_interceptor),
) -> PersonRepository:
    """
    Build the repository strategy chosen when the app was created.

    The choice lives on app.state and never changes for the lifetime of the
    application.
    """
    return build_person_repository(
        request.app.state.person_store_backend,
        session=session,
        engine=engine,
        interceptor=interceptor,
    )


def get_people_service(
    repository: PersonRepository = Depends(get_person_repository),
) -> PeopleService:
    return PeopleService(repository)
