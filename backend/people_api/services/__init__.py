"""
People API - Services Layer
===========================

What:  Everything between the routes (HTTP) and the repositories (persistence).

Service Inventory:
    - audit.py:          AuditInterceptor, stamps created_at/updated_at before commit
    - people_service.py: PeopleService, the CRUD facade over a PersonRepository
    - handlers.py:       Query/command objects and their handler coroutines
    - mapping.py:        Person entity ↔ PersonDto conversion
"""
