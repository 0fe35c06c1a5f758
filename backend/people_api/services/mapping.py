"""
People API - Entity ↔ DTO Mapping
=================================

What:  Converts between the Person ORM entity and its pydantic shapes.
How:   Entity → DTO goes through PersonDto.model_validate (from_attributes);
       DTO → entity copies only client-writable fields.
Who:   Used by the query/command handlers.
"""

from typing import Iterable, List

from people_api.models.person import Person
from people_api.schemas.person import PersonDto, PersonWrite


def to_dto(person: Person) -> PersonDto:
    return PersonDto.model_validate(person)


def to_dtos(people: Iterable[Person]) -> List[PersonDto]:
    return [to_dto(person) for person in people]


def to_entity(payload: PersonWrite) -> Person:
    """Build a new, unsaved Person. id and timestamps are left for the store."""
    return Person(first_name=payload.first_name, last_name=payload.last_name)


def apply_changes(payload: PersonWrite, person: Person) -> Person:
    """Copy client-writable fields onto an existing entity."""
    person.first_name = payload.first_name
    person.last_name = payload.last_name
    return person
