"""
People API - Query & Command Handlers
=====================================

What:  One request type and one handler per use case.
How:   Each handler is a plain coroutine `(request, service) -> result`. It calls
       the PeopleService facade and maps entities to PersonDto. Handlers hold
       no state between calls.
Who:   Called by the /api/people route functions.

Handler Inventory:
    GetAllPeopleQuery    → list[PersonDto]
    GetPersonQuery       → PersonDto            (NotFoundError when absent)
    CreatePersonCommand  → PersonDto
    UpdatePersonCommand  → PersonDto            (NotFoundError when absent)
    DeletePersonCommand  → None                 (absent id is not an error)
"""

import logging
from dataclasses import dataclass
from typing import List

from people_api.exceptions import NotFoundError
from people_api.schemas.person import PersonCreate, PersonDto, PersonUpdate
from people_api.services.mapping import apply_changes, to_dto, to_dtos, to_entity
from people_api.services.people_service import PeopleService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Requests
# ══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class GetAllPeopleQuery:
    pass


@dataclass(frozen=True)
class GetPersonQuery:
    person_id: int


@dataclass(frozen=True)
class CreatePersonCommand:
    payload: PersonCreate


@dataclass(frozen=True)
class UpdatePersonCommand:
    person_id: int
    payload: PersonUpdate


@dataclass(frozen=True)
class DeletePersonCommand:
    person_id: int


# ══════════════════════════════════════════════════════════════════════════
# Handlers
# ══════════════════════════════════════════════════════════════════════════


async def handle_get_all_people(query: GetAllPeopleQuery, service: PeopleService) -> List[PersonDto]:
    people = await service.get_all()
    return to_dtos(people)


async def handle_get_person(query: GetPersonQuery, service: PeopleService) -> PersonDto:
    person = await service.get(query.person_id)
    if person is None:
        raise NotFoundError(resource="person", resource_id=str(query.person_id))
    return to_dto(person)


async def handle_create_person(command: CreatePersonCommand, service: PeopleService) -> PersonDto:
    person = to_entity(command.payload)
    await service.add(person)
    logger.info("Created person %s", person.id)
    return to_dto(person)


async def handle_update_person(command: UpdatePersonCommand, service: PeopleService) -> PersonDto:
    """
    Replace a person's names.

    The store itself treats an unknown id as a silent no-op, so existence is
    checked here and reported as NotFoundError (404).
    """
    person = await service.get(command.person_id)
    if person is None:
        raise NotFoundError(resource="person", resource_id=str(command.person_id))
    apply_changes(command.payload, person)
    await service.update(person)
    return to_dto(person)


async def handle_delete_person(command: DeletePersonCommand, service: PeopleService) -> None:
    await service.delete(command.person_id)
