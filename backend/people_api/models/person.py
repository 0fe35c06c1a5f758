"""
People API - Person SQLAlchemy Model
====================================

What:  ORM model representing the `People` table.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by both repository strategies. The ORM strategy persists it through
       the session; the SQL strategy builds transient instances from result rows.
When:  Instantiated when creating people; returned by every read.

Table Design:
    - Column names are PascalCase (Id, FirstName, ...) to match the existing
      `People` relation; Python attributes stay snake_case.
    - Name columns carry no length limit. The 100-character rule is enforced
      by the request schemas, and the store must not truncate or reject.
    - Timestamps are UTC instants on every dialect (see UTCDateTime).
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.types import TypeDecorator
from sqlalchemy.orm import Mapped, mapped_column

from people_api.database import Base


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware UTC timestamp column.

    Binds: aware datetimes are converted to UTC; naive values are rejected.
    SQLite has no timezone support, so values are stored as naive UTC there
    and UTC is re-attached on read. PostgreSQL keeps TIMESTAMP WITH TIME ZONE.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            raise ValueError(f"Naive datetime {value!r} cannot be stored as a UTC instant")
        value = value.astimezone(timezone.utc)
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Person(Base):
    """
    A person record.

    Lifecycle:
        1. Added: id assigned by the backend, created_at == updated_at == now
        2. Updated: names replaced, updated_at refreshed, created_at untouched
        3. Deleted: row removed (hard delete)

    Timestamps are never set by callers; the AuditInterceptor owns them.
    """

    __tablename__ = "People"

    id: Mapped[int] = mapped_column(
        "Id",
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    first_name: Mapped[str] = mapped_column("FirstName", String, nullable=False)

    last_name: Mapped[str] = mapped_column("LastName", String, nullable=False)

    # ── Timestamps ────────────────────────────────────────────────────────
    # created_at: written once by the ADD stamp, never by an UPDATE
    created_at: Mapped[datetime] = mapped_column(
        "CreatedAt",
        UTCDateTime(),
        nullable=False,
    )

    # updated_at: nullable at the schema level, but always set once a row exists
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        "UpdatedAt",
        UTCDateTime(),
        nullable=True,
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return (
            f"<Person(id={self.id}, first_name='{self.first_name}', "
            f"last_name='{self.last_name}', created_at='{self.created_at}', "
            f"updated_at='{self.updated_at}')>"
        )
