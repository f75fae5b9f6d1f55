"""
Userbase Backend — Custom Exception Hierarchy
===============================================

What:  Defines application-specific exceptions for the failure categories.
Why:   Custom exceptions let the global error handler pick the right HTTP
       status and envelope without any try/except in route handlers.
How:   Each exception carries a message and optional context dict.
       Handlers registered in main.py route them to app.errors.
Who:   Raised by services and the validation layer.

Exception Hierarchy:
    UserbaseError (base)
    ├── ValidationFailure  → 400 Bad Request, {"errors": [...]} envelope
    └── NotFoundError      → 404 Not Found, single-message envelope

    Anything that is not a UserbaseError (SQLAlchemy errors, bugs) is
    "unhandled" and answered with a generic 500.
"""

from typing import Any, Dict, List, NamedTuple, Optional


class UserbaseError(Exception):
    """
    Base exception for all Userbase application errors.

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


class FieldViolation(NamedTuple):
    """A single failed field rule: which field, and the message to report."""

    field: str
    message: str


class ValidationFailure(UserbaseError):
    """
    Raised when one or more field constraints are violated on an inbound DTO.

    HTTP:    400 Bad Request

    All violations are collected before raising, so the client sees every
    broken field in a single response:
        {"errors": [{"field": "name", "message": "must not be empty"}, ...]}
    """

    def __init__(
        self,
        violations: List[FieldViolation],
        context: Optional[Dict[str, Any]] = None,
    ):
        self.violations = list(violations)
        fields = ", ".join(v.field for v in self.violations)
        super().__init__(message=f"Validation failed for: {fields}", context=context)


class NotFoundError(UserbaseError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /api/users/{id} with an id that has no row.
    HTTP:    404 Not Found

    The repository returns None (or False) for missing rows; the service
    converts that into this exception.
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id
