"""
People API - Direct SQL Person Repository
=========================================

What:  PersonRepository issuing hand-written parameterized SQL.
How:   Every call checks a connection out of the engine pool and runs inside its
       own engine.begin() transaction. Statements are SQLAlchemy text() constructs
       with typed bind parameters and result columns, so timestamps go through
       the same UTCDateTime conversion the ORM model uses.
Who:   Selected when PERSON_STORE_BACKEND=sql.

There is no change tracking on this path: add() and update() tag their
records for the AuditInterceptor explicitly.

Identifiers are double-quoted because the relation uses PascalCase names;
quoted identifiers are portable across PostgreSQL and SQLite.
"""

import logging
from typing import List, Optional

from sqlalchemy import Integer, String, bindparam, text
from sqlalchemy.ext.asyncio import AsyncEngine

from people_api.models.person import Person, UTCDateTime
from people_api.repositories.base import PersonRepository
from people_api.services.audit import AuditInterceptor, WriteOperation

logger = logging.getLogger(__name__)


_SELECT_COLUMNS = (
    'SELECT "Id" AS id, "FirstName" AS first_name, "LastName" AS last_name, '
    '"CreatedAt" AS created_at, "UpdatedAt" AS updated_at FROM "People"'
)

_RESULT_TYPES = dict(
    id=Integer(),
    first_name=String(),
    last_name=String(),
    created_at=UTCDateTime(),
    updated_at=UTCDateTime(),
)

SELECT_ALL = text(f'{_SELECT_COLUMNS} ORDER BY "Id"').columns(**_RESULT_TYPES)

SELECT_BY_ID = text(f'{_SELECT_COLUMNS} WHERE "Id" = :id').columns(**_RESULT_TYPES)

INSERT = text(
    'INSERT INTO "People" ("FirstName", "LastName", "CreatedAt", "UpdatedAt") '
    "VALUES (:first_name, :last_name, :created_at, :updated_at) "
    'RETURNING "Id"'
).bindparams(
    bindparam("created_at", type_=UTCDateTime()),
    bindparam("updated_at", type_=UTCDateTime()),
)

INSERT_WITH_ID = text(
    'INSERT INTO "People" ("Id", "FirstName", "LastName", "CreatedAt", "UpdatedAt") '
    "VALUES (:id, :first_name, :last_name, :created_at, :updated_at) "
    'RETURNING "Id"'
).bindparams(
    bindparam("created_at", type_=UTCDateTime()),
    bindparam("updated_at", type_=UTCDateTime()),
)

# CreatedAt is never part of an UPDATE
UPDATE = text(
    'UPDATE "People" SET "FirstName" = :first_name, "LastName" = :last_name, '
    '"UpdatedAt" = :updated_at WHERE "Id" = :id'
).bindparams(bindparam("updated_at", type_=UTCDateTime()))

DELETE = text('DELETE FROM "People" WHERE "Id" = :id')


class PersonRepositorySQL(PersonRepository):
    """
    Direct-SQL strategy.

    Returned Person objects are transient copies built from result rows; they
    are not attached to any session.
    """

    def __init__(self, engine: AsyncEngine, interceptor: AuditInterceptor):
        self.engine = engine
        self.interceptor = interceptor

    async def get(self, person_id: int) -> Optional[Person]:
        async with self.engine.connect() as conn:
            result = await conn.execute(SELECT_BY_ID, {"id": person_id})
            row = result.mappings().one_or_none()
        return Person(**row) if row is not None else None

    async def get_all(self) -> List[Person]:
        async with self.engine.connect() as conn:
            result = await conn.execute(SELECT_ALL)
            rows = result.mappings().all()
        return [Person(**row) for row in rows]

    async def add(self, person: Person) -> None:
        self.interceptor.apply([(person, WriteOperation.ADD)])
        params = {
            "first_name": person.first_name,
            "last_name": person.last_name,
            "created_at": person.created_at,
            "updated_at": person.updated_at,
        }
        statement = INSERT
        if person.id is not None:
            statement = INSERT_WITH_ID
            params["id"] = person.id

        async with self.engine.begin() as conn:
            result = await conn.execute(statement, params)
            person.id = result.scalar_one()
        logger.info("Person %s added", person.id)

    async def update(self, person: Person) -> None:
        previous_updated_at = person.updated_at
        self.interceptor.apply([(person, WriteOperation.UPDATE)])

        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(
                    UPDATE,
                    {
                        "id": person.id,
                        "first_name": person.first_name,
                        "last_name": person.last_name,
                        "updated_at": person.updated_at,
                    },
                )
                rowcount = result.rowcount
        except Exception:
            person.updated_at = previous_updated_at
            raise

        if rowcount == 0:
            # Nothing was written, so the caller's object keeps its old stamp
            person.updated_at = previous_updated_at
            logger.info("Update skipped: person %s does not exist", person.id)
            return
        logger.info("Person %s updated", person.id)

    async def delete(self, person_id: int) -> None:
        async with self.engine.begin() as conn:
            result = await conn.execute(DELETE, {"id": person_id})
            rowcount = result.rowcount
        if rowcount == 0:
            logger.debug("Delete skipped: person %s does not exist", person_id)
            return
        logger.info("Person %s deleted", person_id)
