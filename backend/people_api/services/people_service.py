"""
People API - People Service (Access Facade)
===========================================

What:  The uniform CRUD interface the rest of the application depends on.
How:   Forwards every call to the PersonRepository chosen when the app was
       created. No business rules live here.
Who:   Built per request by people_api.dependencies.get_people_service;
       called by the query/command handlers.

Design:
    PeopleService holds no state besides its repository, and a new instance
    is created for every request, so nothing is shared across requests.
"""

import logging
from typing import List, Optional

from people_api.models.person import Person
from people_api.repositories.base import PersonRepository

logger = logging.getLogger(__name__)


class PeopleService:
    """Delegating facade over a PersonRepository."""

    def __init__(self, repository: PersonRepository):
        self.repository = repository

    async def get(self, person_id: int) -> Optional[Person]:
        return await self.repository.get(person_id)

    async def get_all(self) -> List[Person]:
        return await self.repository.get_all()

    async def add(self, person: Person) -> None:
        """Persist a new person; person.id is set when this returns."""
        await self.repository.add(person)

    async def update(self, person: Person) -> None:
        await self.repository.update(person)

    async def delete(self, person_id: int) -> None:
        await self.repository.delete(person_id)
