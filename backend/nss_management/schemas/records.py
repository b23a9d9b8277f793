"""
NSS Management Backend: Pydantic Request/Response Schemas
===========================================================

What:  Pydantic models defining the JSON contract for the three record types.
Why:   Type coercion of request bodies, serialization of responses, and
       OpenAPI documentation.
How:   Input models have every field optional: presence of required fields is
       decided by the validation layer after defaults (create) or the stored
       record (update) are merged in. Response models read ORM objects
       directly (from_attributes).

Wire naming:
    JSON uses camelCase (hoursCompleted, createdAt, updatedAt) and `_id` for
    the record identity. Python attributes stay snake_case; aliases bridge the
    two. populate_by_name lets the models also be filled from ORM attributes.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


_INPUT_CONFIG = ConfigDict(populate_by_name=True, extra="ignore")
_OUTPUT_CONFIG = ConfigDict(populate_by_name=True, from_attributes=True)


# ══════════════════════════════════════════════════════════════════════════
# Input Models: request bodies for POST and PUT
# ══════════════════════════════════════════════════════════════════════════


class VolunteerInput(BaseModel):
    model_config = _INPUT_CONFIG

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    college: Optional[str] = None
    hours_completed: Optional[float] = Field(default=None, alias="hoursCompleted")
    status: Optional[str] = None


class EventInput(BaseModel):
    model_config = _INPUT_CONFIG

    name: Optional[str] = None
    date: Optional[datetime] = None
    location: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


class ActivityInput(BaseModel):
    model_config = _INPUT_CONFIG

    name: Optional[str] = None
    date: Optional[datetime] = None
    hours: Optional[float] = None
    description: Optional[str] = None
    status: Optional[str] = None


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class RecordResponse(BaseModel):
    """Identity and store-managed timestamps common to all records."""
    model_config = _OUTPUT_CONFIG

    id: uuid.UUID = Field(alias="_id", description="Server-assigned record identity")
    created_at: datetime = Field(alias="createdAt", description="Creation time (UTC)")
    updated_at: datetime = Field(alias="updatedAt", description="Last update time (UTC)")


class VolunteerResponse(RecordResponse):
    name: str
    email: str
    phone: Optional[str] = None
    college: Optional[str] = None
    hours_completed: float = Field(alias="hoursCompleted")
    status: str


class EventResponse(RecordResponse):
    name: str
    date: datetime
    location: str
    description: Optional[str] = None
    status: str


class ActivityResponse(RecordResponse):
    name: str
    date: datetime
    hours: float
    description: Optional[str] = None
    status: str


class MessageResponse(BaseModel):
    """Confirmation body, e.g. {"message": "Event deleted successfully"}."""
    message: str


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g. "validation_error", "not_found")
        message: Human-readable description
        details: Optional extra context (e.g. which field failed validation)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
