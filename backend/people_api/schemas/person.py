"""
People API - Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the API contract for person records.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and generate OpenAPI documentation.
Who:   Used by the handlers (via services/mapping.py) and route signatures.

JSON uses camelCase keys (firstName, createdAt, ...); Python code uses
snake_case. Both spellings are accepted on input.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Same limit for both name fields
NAME_MAX_LENGTH = 100


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class PersonDto(CamelModel):
    """
    What:  Transfer shape of a Person record.
    Who:   Returned by every /api/people endpoint that yields data.
    """
    id: int = Field(description="Identifier assigned by the store")
    first_name: str = Field(description="Given name")
    last_name: str = Field(description="Family name")
    created_at: datetime = Field(description="When the record was created (UTC ISO 8601)")
    updated_at: Optional[datetime] = Field(
        default=None,
        description="When the record was last written (UTC ISO 8601)",
    )


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class PersonWrite(CamelModel):
    """
    Fields a client may write.

    Rules (per field):
        - required
        - not empty, and not only whitespace
        - at most 100 characters
    Surrounding whitespace is kept as sent; only the emptiness check strips it.
    """
    first_name: str = Field(max_length=NAME_MAX_LENGTH, description="Given name")
    last_name: str = Field(max_length=NAME_MAX_LENGTH, description="Family name")

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v


class PersonCreate(PersonWrite):
    """Body of POST /api/people."""


class PersonUpdate(PersonWrite):
    """Body of PUT /api/people/{id}. Replaces both names."""


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "person with ID '42' was not found",
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and dependency status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    person_store_backend: str = Field(description="Active repository strategy: orm or sql")
    uptime_seconds: float = Field(description="Seconds since service started")
