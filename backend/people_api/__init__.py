"""
People API - Application Package Initializer
============================================

What: Marks the `people_api` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is split into layers that only call downward:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, auth, status codes
    ├─────────────────────────────────────┤
    │     Handlers + PeopleService        │  ← Queries/commands, DTO mapping
    ├─────────────────────────────────────┤
    │   Repositories + AuditInterceptor   │  ← ORM or raw SQL, timestamp stamping
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy engine/sessions
    └─────────────────────────────────────┘

    Routes never touch a repository directly; they go through the handlers,
    which go through the PeopleService facade. The active repository strategy
    is picked once, when the application is created.
"""

__version__ = "1.0.0"
