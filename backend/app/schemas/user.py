"""
Userbase Backend — Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the API contract.
Why:   Automatic serialization and OpenAPI doc generation.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate the Swagger/OpenAPI documentation.

Design Decision:
    UserDto is deliberately permissive at the type level (every field is
    Optional). Business constraints (non-empty name, email syntax, sizes)
    live in app/validation.py so every violated field is reported together
    in the {"errors": [...]} envelope instead of FastAPI's default 422.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Resource Models
# ══════════════════════════════════════════════════════════════════════════


class UserDto(BaseModel):
    """
    What:  Wire representation of a User.
    Who:   Accepted by POST/PUT /api/users and returned by every users route.

    `id` is read-only: any value sent by the client is ignored and the
    server-assigned id is returned.
    """
    id: Optional[int] = Field(default=None, description="Server-assigned identifier (ignored on input)")
    name: Optional[str] = Field(default=None, description="Display name, 1-100 characters", examples=["Ann"])
    email: Optional[str] = Field(default=None, description="Valid email address", examples=["ann@x.com"])
    about: Optional[str] = Field(default=None, description="Optional free text, up to 1000 characters")

    model_config = {"from_attributes": True}


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models — documented in OpenAPI, built in app/errors.py
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Envelope for single errors (404, 405, 500).

    Example:
        {
            "timestamp": "2024-01-15T12:00:00.000000+00:00",
            "status": 404,
            "error": "Not Found",
            "message": "User with ID 1 not found",
            "path": "/api/users/1"
        }
    """
    timestamp: datetime = Field(description="When the error occurred (UTC)")
    status: int = Field(description="HTTP status code")
    error: str = Field(description="HTTP reason phrase")
    message: str = Field(description="Human-readable error description")
    path: str = Field(description="Request path that failed")


class FieldError(BaseModel):
    field: str = Field(description="Name of the offending field")
    message: str = Field(description="Why the value was rejected")


class ValidationErrorResponse(BaseModel):
    """Envelope for 400 responses: one entry per violated field."""
    errors: List[FieldError]


# ══════════════════════════════════════════════════════════════════════════
# Operational Models
# ══════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


class InfoResponse(BaseModel):
    name: str = Field(description="Application name")
    version: str = Field(description="Application version")
    description: str = Field(description="What the service does")
