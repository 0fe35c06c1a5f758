"""
People API - People Route Handlers
==================================

What:  REST endpoints for person records under /api/people.
How:   Each route builds a query/command object and passes it, with the
       request's PeopleService, to the matching handler coroutine.
Who:   Called by API clients. Reads are public; writes need the admin role.

Endpoints:
    GET    /api/people           list all people
    GET    /api/people/{id}      one person (404 when absent)
    POST   /api/people           create (201)
    PUT    /api/people/{id}      replace names (404 when absent)
    DELETE /api/people/{id}      delete (204, also when absent)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from people_api.config import settings
from people_api.dependencies import get_people_service
from people_api.schemas.person import ErrorResponse, PersonCreate, PersonDto, PersonUpdate
from people_api.security import Principal, require_role
from people_api.services.handlers import (
    CreatePersonCommand,
    DeletePersonCommand,
    GetAllPeopleQuery,
    GetPersonQuery,
    UpdatePersonCommand,
    handle_create_person,
    handle_delete_person,
    handle_get_all_people,
    handle_get_person,
    handle_update_person,
)
from people_api.services.people_service import PeopleService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/people", tags=["People"])

# Resolved when the router is imported; ADMIN_ROLE changes need a restart
require_admin = require_role(settings.admin_role)

AUTH_RESPONSES = {
    401: {"description": "Missing or invalid bearer token", "model": ErrorResponse},
    403: {"description": "Caller lacks the admin role", "model": ErrorResponse},
}


@router.get(
    "",
    response_model=List[PersonDto],
    summary="List all people",
)
async def list_people(
    service: PeopleService = Depends(get_people_service),
) -> List[PersonDto]:
    return await handle_get_all_people(GetAllPeopleQuery(), service)


@router.get(
    "/{person_id}",
    response_model=PersonDto,
    responses={404: {"description": "Person not found", "model": ErrorResponse}},
    summary="Get a single person by ID",
)
async def get_person(
    person_id: int,
    service: PeopleService = Depends(get_people_service),
) -> PersonDto:
    return await handle_get_person(GetPersonQuery(person_id=person_id), service)


@router.post(
    "",
    response_model=PersonDto,
    status_code=status.HTTP_201_CREATED,
    responses=AUTH_RESPONSES,
    summary="Create a person",
)
async def create_person(
    payload: PersonCreate,
    response: Response,
    service: PeopleService = Depends(get_people_service),
    principal: Principal = Depends(require_admin),
) -> PersonDto:
    result = await handle_create_person(CreatePersonCommand(payload=payload), service)
    response.headers["Location"] = f"{router.prefix}/{result.id}"
    logger.info("Person %s created by %s", result.id, principal.subject)
    return result


@router.put(
    "/{person_id}",
    response_model=PersonDto,
    responses={
        404: {"description": "Person not found", "model": ErrorResponse},
        **AUTH_RESPONSES,
    },
    summary="Replace a person's names",
)
async def update_person(
    person_id: int,
    payload: PersonUpdate,
    service: PeopleService = Depends(get_people_service),
    principal: Principal = Depends(require_admin),
) -> PersonDto:
    result = await handle_update_person(
        UpdatePersonCommand(person_id=person_id, payload=payload), service
    )
    logger.info("Person %s updated by %s", person_id, principal.subject)
    return result


@router.delete(
    "/{person_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=AUTH_RESPONSES,
    summary="Delete a person",
    description="Deleting an id that does not exist is not an error.",
)
async def delete_person(
    person_id: int,
    service: PeopleService = Depends(get_people_service),
    principal: Principal = Depends(require_admin),
) -> Response:
    await handle_delete_person(DeletePersonCommand(person_id=person_id), service)
    logger.info("Person %s deleted by %s", person_id, principal.subject)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
