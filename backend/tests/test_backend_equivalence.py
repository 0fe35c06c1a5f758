"""
People API - Repository Strategy Equivalence Tests
==================================================

What:  Checks that the ORM and SQL strategies are interchangeable.
How:   The same sequence of operations runs against both strategies on two
       separate databases with identically configured clocks; the final
       contents must match. The remaining tests write with one strategy and
       read with the other on a shared database.
"""

import pytest

from people_api.database import build_engine, build_session_factory, create_schema
from people_api.models.person import Person
from people_api.repositories import PersonRepositoryORM, PersonRepositorySQL
from people_api.services.audit import AuditInterceptor


def snapshot(people):
    return [
        (p.id, p.first_name, p.last_name, p.created_at, p.updated_at)
        for p in people
    ]


async def run_scenario(repository, clock):
    """Creates three people, renames one, deletes another."""
    ada = Person(first_name="Ada", last_name="Lovelace")
    grace = Person(first_name="Grace", last_name="Hopper")
    alan = Person(first_name="Alan", last_name="Turing")
    for person in (ada, grace, alan):
        await repository.add(person)
        clock.advance(seconds=30)

    loaded = await repository.get(ada.id)
    loaded.last_name = "King"
    await repository.update(loaded)

    clock.advance(minutes=5)
    await repository.delete(grace.id)
    await repository.delete(9999)
    await repository.update(Person(id=9999, first_name="No", last_name="Body"))

    return await repository.get_all()


@pytest.mark.asyncio
async def test_strategies_produce_identical_state(tmp_path, clock_factory):
    orm_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'orm.db'}")
    sql_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'sql.db'}")
    try:
        await create_schema(orm_engine)
        await create_schema(sql_engine)

        orm_clock = clock_factory()
        async with build_session_factory(orm_engine)() as session:
            orm_people = await run_scenario(
                PersonRepositoryORM(session, AuditInterceptor(orm_clock)), orm_clock
            )

        sql_clock = clock_factory()
        sql_people = await run_scenario(
            PersonRepositorySQL(sql_engine, AuditInterceptor(sql_clock)), sql_clock
        )

        assert len(orm_people) == 2
        assert snapshot(orm_people) == snapshot(sql_people)
    finally:
        await orm_engine.dispose()
        await sql_engine.dispose()


@pytest.mark.asyncio
async def test_orm_writes_are_visible_to_sql_reads(session_factory, db_engine, clock):
    interceptor = AuditInterceptor(clock)
    person = Person(first_name="Ada", last_name="Lovelace")
    async with session_factory() as session:
        await PersonRepositoryORM(session, interceptor).add(person)

    stored = await PersonRepositorySQL(db_engine, interceptor).get(person.id)

    assert snapshot([stored]) == snapshot([person])


@pytest.mark.asyncio
async def test_sql_writes_are_visible_to_orm_reads(session_factory, db_engine, clock):
    interceptor = AuditInterceptor(clock)
    sql_repository = PersonRepositorySQL(db_engine, interceptor)
    person = Person(first_name="Ada", last_name="Lovelace")
    await sql_repository.add(person)

    t2 = clock.advance(hours=1)
    person.last_name = "King"
    await sql_repository.update(person)

    async with session_factory() as session:
        stored = await PersonRepositoryORM(session, interceptor).get(person.id)

    assert stored.last_name == "King"
    assert stored.created_at == person.created_at
    assert stored.updated_at == t2
