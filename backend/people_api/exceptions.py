"""
People API - Custom Exception Hierarchy
=======================================

What:  Defines application-specific exceptions for the HTTP-facing layers.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by handlers and security dependencies; caught by global handlers.

Exception Hierarchy:
    PeopleApiError (base)
    ├── NotFoundError          → 404 Not Found
    ├── AuthenticationError    → 401 Unauthorized
    └── AuthorizationError     → 403 Forbidden

Not listed here:
    Repositories never raise these. A missing record is None from get() and a
    no-op for update()/delete(); backend failures surface as SQLAlchemyError
    and are turned into a generic 500 by main.py. Request body validation is
    pydantic's job (FastAPI answers 422).
"""

from typing import Any, Dict, Optional


class PeopleApiError(Exception):
    """
    Base exception for all People API application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(PeopleApiError):
    """
    Raised when a requested resource does not exist.

    When:    GET or PUT /api/people/{id} with an id that has no row.
    HTTP:    404 Not Found

    The repositories return None for missing records; the handlers convert
    that None into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class AuthenticationError(PeopleApiError):
    """
    Raised when a bearer token is missing, malformed, expired, or signed
    for another issuer/audience.

    HTTP:    401 Unauthorized, with a `WWW-Authenticate: Bearer` header
    """

    def __init__(
        self,
        message: str = "Authentication credentials were missing or invalid",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AuthorizationError(PeopleApiError):
    """
    Raised when an authenticated caller lacks the role an endpoint requires.

    HTTP:    403 Forbidden
    """

    def __init__(
        self,
        required_role: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["required_role"] = required_role
        super().__init__(
            message=f"This operation requires the '{required_role}' role",
            context=ctx,
        )
        self.required_role = required_role
