"""
People API - Audit Timestamp Interceptor
========================================

What:  Stamps created_at/updated_at on Person records right before they are committed.
How:   Callers hand over pending records tagged with an explicit WriteOperation.
       The ORM repository gets its tags from the session's before_flush event
       (session.new → ADD, session.dirty → UPDATE); the SQL repository tags
       each statement itself.
Who:   Used by PersonRepositoryORM and PersonRepositorySQL.
When:  Once per commit. `now` is read from the injected Clock exactly once, so
       every record in the same commit carries the same instant.

Rules:
    ADD     created_at = now, updated_at = now
    UPDATE  updated_at = now, created_at left as persisted
"""

import enum
import logging
from datetime import datetime
from typing import Iterable, Optional, Tuple

from sqlalchemy import event, inspect
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from people_api.clock import Clock
from people_api.models.person import Person

logger = logging.getLogger(__name__)


class WriteOperation(str, enum.Enum):
    """Kind of pending write a record is part of."""

    ADD = "add"
    UPDATE = "update"


class AuditInterceptor:
    """
    Applies audit timestamps to pending Person writes.

    Stateless apart from the clock; one instance can serve every request.
    """

    def __init__(self, clock: Clock):
        self.clock = clock

    def stamp(
        self,
        person: Person,
        operation: WriteOperation,
        now: Optional[datetime] = None,
    ) -> datetime:
        """
        Stamp a single record and return the instant used.

        Args:
            person: The record about to be written
            operation: ADD for inserts, UPDATE for modifications
            now: Instant shared by the whole commit; read from the clock if omitted
        """
        if now is None:
            now = self.clock.now()
        if operation is WriteOperation.ADD:
            person.created_at = now
        person.updated_at = now
        return now

    def apply(self, pending: Iterable[Tuple[Person, WriteOperation]]) -> None:
        """Stamp every pending record with one clock reading."""
        pending = list(pending)
        if not pending:
            return
        now = self.clock.now()
        for person, operation in pending:
            self.stamp(person, operation, now)
        logger.debug("Audit stamped %d record(s) at %s", len(pending), now.isoformat())

    # ── ORM Integration ───────────────────────────────────────────────────

    def attach(self, session) -> None:
        """
        Register this interceptor on a session's before_flush event.

        Accepts an AsyncSession or a plain Session. Attaching the same
        interceptor twice is a no-op.
        """
        sync_session: Session = (
            session.sync_session if isinstance(session, AsyncSession) else session
        )
        if not event.contains(sync_session, "before_flush", self._before_flush):
            event.listen(sync_session, "before_flush", self._before_flush)

    def detach(self, session) -> None:
        sync_session: Session = (
            session.sync_session if isinstance(session, AsyncSession) else session
        )
        if event.contains(sync_session, "before_flush", self._before_flush):
            event.remove(sync_session, "before_flush", self._before_flush)

    def _before_flush(self, session: Session, flush_context, instances) -> None:
        pending = [
            (obj, WriteOperation.ADD) for obj in session.new if isinstance(obj, Person)
        ]
        for obj in session.dirty:
            if not isinstance(obj, Person):
                continue
            # created_at is immutable once persisted
            history = inspect(obj).attrs.created_at.history
            if history.deleted and history.added:
                logger.warning(
                    "Reverting attempted change to created_at on person %s", obj.id
                )
                obj.created_at = history.deleted[0]
            pending.append((obj, WriteOperation.UPDATE))
        self.apply(pending)
