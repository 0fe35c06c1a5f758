"""
People API - Person Repository Tests
====================================

What:  Contract tests for the PersonRepository strategies.
How:   The `repository` fixture is parametrized, so every test here runs once
       against PersonRepositoryORM and once against PersonRepositorySQL, each on
       a fresh SQLite database. Time is controlled through the FakeClock.

What we test:
    ✅ add() assigns distinct ids and stamps both timestamps with the same instant
    ✅ add() overwrites caller-supplied timestamps
    ✅ update() refreshes updated_at only, even when the names did not change
    ✅ update() accepts an object the repository did not hand out
    ✅ update()/delete() on an unknown id are silent no-ops
    ✅ get()/get_all() read back what was written, ordered by id
    ✅ Names longer than the API limit are stored unchanged
    ✅ Writes to one row never move another row's updated_at
    ✅ A failed write leaves the repository usable and the caller's stamp intact
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from people_api.models.person import Person

# FakeClock start instant (see conftest.py)
T1 = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def make_person(first: str = "Ada", last: str = "Lovelace") -> Person:
    return Person(first_name=first, last_name=last)


class TestAdd:

    @pytest.mark.asyncio
    async def test_add_assigns_id_and_timestamps(self, repository):
        person = make_person()

        await repository.add(person)

        assert person.id is not None
        assert person.created_at == T1
        assert person.updated_at == T1

        stored = await repository.get(person.id)
        assert stored.first_name == "Ada"
        assert stored.last_name == "Lovelace"
        assert stored.created_at == T1
        assert stored.updated_at == T1

    @pytest.mark.asyncio
    async def test_add_assigns_distinct_ids(self, repository):
        first = make_person("Ada", "Lovelace")
        second = make_person("Grace", "Hopper")

        await repository.add(first)
        await repository.add(second)

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_add_overwrites_supplied_timestamps(self, repository):
        person = make_person()
        person.created_at = T1 - timedelta(days=365)
        person.updated_at = T1 - timedelta(days=365)

        await repository.add(person)

        stored = await repository.get(person.id)
        assert stored.created_at == T1
        assert stored.updated_at == T1

    @pytest.mark.asyncio
    async def test_long_names_are_not_truncated(self, repository):
        long_name = "x" * 150
        person = make_person(long_name, long_name)

        await repository.add(person)

        stored = await repository.get(person.id)
        assert stored.first_name == long_name
        assert stored.last_name == long_name


class TestUpdate:

    @pytest.mark.asyncio
    async def test_update_changes_names_and_updated_at(self, repository, clock):
        person = make_person()
        await repository.add(person)

        t2 = clock.advance(hours=2)
        loaded = await repository.get(person.id)
        loaded.last_name = "King"
        await repository.update(loaded)

        stored = await repository.get(person.id)
        assert stored.first_name == "Ada"
        assert stored.last_name == "King"
        assert stored.created_at == T1
        assert stored.updated_at == t2
        assert stored.updated_at > stored.created_at

    @pytest.mark.asyncio
    async def test_update_without_changes_still_refreshes(self, repository, clock):
        person = make_person()
        await repository.add(person)

        t2 = clock.advance(minutes=1)
        loaded = await repository.get(person.id)
        await repository.update(loaded)

        stored = await repository.get(person.id)
        assert stored.created_at == T1
        assert stored.updated_at == t2

    @pytest.mark.asyncio
    async def test_update_from_detached_copy(self, repository, clock):
        person = make_person()
        await repository.add(person)

        t2 = clock.advance(minutes=10)
        copy = Person(id=person.id, first_name="Augusta", last_name="King")
        await repository.update(copy)

        stored = await repository.get(person.id)
        assert stored.first_name == "Augusta"
        assert stored.last_name == "King"
        assert stored.created_at == T1
        assert stored.updated_at == t2

    @pytest.mark.asyncio
    async def test_update_missing_id_is_noop(self, repository, clock):
        existing = make_person()
        await repository.add(existing)

        clock.advance(minutes=10)
        ghost = Person(id=9999, first_name="No", last_name="Body")
        await repository.update(ghost)

        assert ghost.updated_at is None
        assert await repository.get(9999) is None
        people = await repository.get_all()
        assert [p.id for p in people] == [existing.id]

    @pytest.mark.asyncio
    async def test_writes_to_other_rows_leave_updated_at_alone(self, repository, clock):
        ada = make_person("Ada", "Lovelace")
        grace = make_person("Grace", "Hopper")
        await repository.add(ada)
        await repository.add(grace)

        t2 = clock.advance(minutes=1)
        loaded = await repository.get(ada.id)
        loaded.last_name = "King"
        await repository.update(loaded)

        clock.advance(minutes=5)
        await repository.delete(grace.id)
        await repository.add(make_person("Alan", "Turing"))

        stored = await repository.get(ada.id)
        assert stored.created_at == T1
        assert stored.updated_at == t2

    @pytest.mark.asyncio
    async def test_sequential_updates_advance_updated_at(self, repository, clock):
        person = make_person()
        await repository.add(person)

        stamps = []
        for minutes in (1, 2, 3):
            clock.advance(minutes=minutes)
            loaded = await repository.get(person.id)
            await repository.update(loaded)
            stamps.append((await repository.get(person.id)).updated_at)

        assert stamps == sorted(stamps)
        assert len(set(stamps)) == 3


class TestReadAndDelete:

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, repository):
        assert await repository.get(12345) is None

    @pytest.mark.asyncio
    async def test_get_all_empty(self, repository):
        assert await repository.get_all() == []

    @pytest.mark.asyncio
    async def test_get_all_returns_every_person_ordered_by_id(self, repository):
        names = [("Ada", "Lovelace"), ("Grace", "Hopper"), ("Alan", "Turing")]
        for first, last in names:
            await repository.add(make_person(first, last))

        people = await repository.get_all()

        assert [(p.first_name, p.last_name) for p in people] == names
        ids = [p.id for p in people]
        assert ids == sorted(ids)

    @pytest.mark.asyncio
    async def test_delete_removes_person(self, repository):
        keep = make_person("Grace", "Hopper")
        drop = make_person()
        await repository.add(keep)
        await repository.add(drop)

        await repository.delete(drop.id)

        assert await repository.get(drop.id) is None
        assert [p.id for p in await repository.get_all()] == [keep.id]

    @pytest.mark.asyncio
    async def test_delete_missing_id_succeeds(self, repository):
        await repository.delete(9999)
        assert await repository.get_all() == []


class TestLifecycle:

    @pytest.mark.asyncio
    async def test_create_rename_delete(self, repository, clock):
        """Ada Lovelace is created, renamed to King, then removed."""
        person = make_person("Ada", "Lovelace")
        await repository.add(person)
        person_id = person.id

        t2 = clock.advance(days=1)
        loaded = await repository.get(person_id)
        loaded.last_name = "King"
        await repository.update(loaded)

        renamed = await repository.get(person_id)
        assert (renamed.first_name, renamed.last_name) == ("Ada", "King")
        assert renamed.created_at == T1
        assert renamed.updated_at == t2

        await repository.delete(person_id)
        assert await repository.get(person_id) is None


class TestBackendFailure:
    """A failed write must not leave the repository unusable or the caller misinformed."""

    @pytest.mark.asyncio
    async def test_repository_usable_after_failed_add(self, repository):
        first = make_person()
        await repository.add(first)
        first_id = first.id

        duplicate = Person(id=first_id, first_name="Grace", last_name="Hopper")
        with pytest.raises(SQLAlchemyError):
            await repository.add(duplicate)

        people = await repository.get_all()
        assert [p.id for p in people] == [first_id]
        assert people[0].first_name == "Ada"

        second = make_person("Alan", "Turing")
        await repository.add(second)
        assert second.id != first_id

    @pytest.mark.asyncio
    async def test_failed_sql_update_restores_updated_at(self, sql_repository, db_engine, clock):
        person = make_person()
        await sql_repository.add(person)

        async with db_engine.begin() as conn:
            await conn.execute(text('DROP TABLE "People"'))

        clock.advance(hours=1)
        person.last_name = "King"
        with pytest.raises(SQLAlchemyError):
            await sql_repository.update(person)

        assert person.created_at == T1
        assert person.updated_at == T1
