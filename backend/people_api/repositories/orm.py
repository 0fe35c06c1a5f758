"""
People API - ORM Person Repository
==================================

What:  PersonRepository backed by the SQLAlchemy ORM unit of work.
How:   Uses the request-scoped AsyncSession; every write commits on its own.
       The AuditInterceptor is attached to the session's before_flush event,
       so timestamps are applied to whatever the session is about to write.
Who:   Selected when PERSON_STORE_BACKEND=orm (the default).
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import flag_modified

from people_api.models.person import Person
from people_api.repositories.base import PersonRepository
from people_api.services.audit import AuditInterceptor

logger = logging.getLogger(__name__)


class PersonRepositoryORM(PersonRepository):
    """
    ORM strategy.

    Objects returned by get()/get_all() belong to the session's identity map
    for the rest of the request.
    """

    def __init__(self, session: AsyncSession, interceptor: AuditInterceptor):
        self.session = session
        self.interceptor = interceptor
        interceptor.attach(session)

    async def _commit(self) -> None:
        """Commit, or roll back so the session stays usable after a backend error."""
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    async def get(self, person_id: int) -> Optional[Person]:
        return await self.session.get(Person, person_id)

    async def get_all(self) -> List[Person]:
        result = await self.session.execute(select(Person).order_by(Person.id))
        return list(result.scalars().all())

    async def add(self, person: Person) -> None:
        self.session.add(person)
        # commit() autoflushes: before_flush stamps the new row, the flush assigns its id
        await self._commit()
        logger.info("Person %s added", person.id)

    async def update(self, person: Person) -> None:
        existing = await self.session.get(Person, person.id)
        if existing is None:
            logger.info("Update skipped: person %s does not exist", person.id)
            return

        if existing is not person:
            # Detached copy from the caller: only the names are writable
            existing.first_name = person.first_name
            existing.last_name = person.last_name

        # Unchanged names still count as an update and refresh updated_at
        flag_modified(existing, "updated_at")

        await self._commit()

        if existing is not person:
            # Setting attributes on the identity-mapped object would mark it dirty again
            person.created_at = existing.created_at
            person.updated_at = existing.updated_at
        logger.info("Person %s updated", person.id)

    async def delete(self, person_id: int) -> None:
        person = await self.get(person_id)
        if person is None:
            logger.debug("Delete skipped: person %s does not exist", person_id)
            return
        await self.session.delete(person)
        await self._commit()
        logger.info("Person %s deleted", person_id)
