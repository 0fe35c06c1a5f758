"""
People API - Person Repository Interface
========================================

What:  Abstract base class defining the persistence contract for Person records.
How:   Concrete strategies inherit from PersonRepository and implement every method.
Who:   Called by PeopleService; implemented by PersonRepositoryORM and PersonRepositorySQL.

Contract (identical for every strategy):
    get(id)        → Person, or None when absent (not an error)
    get_all()      → every Person (callers must not rely on order)
    add(person)    → assigns person.id if unset, stamps timestamps, commits
    update(person) → writes names for person.id, refreshes updated_at, commits;
                     silent no-op when the id does not exist
    delete(id)     → removes the row; silent no-op when absent

Backend failures (connectivity, constraint violations) propagate unchanged.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from people_api.models.person import Person


class PersonRepository(ABC):
    """Persistence boundary for Person entities."""

    @abstractmethod
    async def get(self, person_id: int) -> Optional[Person]:
        """Single-record lookup by primary key."""
        ...

    @abstractmethod
    async def get_all(self) -> List[Person]:
        """Return the full relation."""
        ...

    @abstractmethod
    async def add(self, person: Person) -> None:
        """
        Persist a new record.

        Side effects:
            person.id, person.created_at and person.updated_at are set on the
            caller's object once the insert is committed.
        """
        ...

    @abstractmethod
    async def update(self, person: Person) -> None:
        """
        Persist name changes for the record identified by person.id.

        Existence is not checked first: an unknown id affects zero rows and
        leaves the caller's object untouched.
        """
        ...

    @abstractmethod
    async def delete(self, person_id: int) -> None:
        """Remove the record if present."""
        ...
