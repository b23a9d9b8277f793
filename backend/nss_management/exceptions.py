"""
NSS Management Backend: Custom Exception Hierarchy
====================================================

What:  Application-specific exceptions for the CRUD error taxonomy.
Why:   Services raise typed errors; global handlers (registered in main.py)
       turn them into JSON responses with the right status code, so route
       functions stay free of try/except blocks.
How:   Each exception class carries a message and optional context dict.

Exception Hierarchy:
    NSSManagementError (base)
    ├── ValidationError          → 400 Bad Request (missing/invalid field)
    │   └── DuplicateKeyError    → 400 Bad Request (unique constraint, e.g. email)
    ├── NotFoundError            → 404 Not Found
    └── DatabaseError            → 500 Internal Server Error (raw store error text)

DuplicateKeyError subclasses ValidationError so that update paths, which treat
every write rejection as a 400, can catch both in one clause, while the
exception handler still reports it under its own error code.
"""

from typing import Any, Dict, Optional


class NSSManagementError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Client-facing error description (returned in the response body)
        context:  Additional debug info (logged, returned only as `details`
                  for validation errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NSSManagementError):
    """
    Raised when a request body fails the validation layer.

    When:    Required field missing or blank, value cannot be coerced to the
             field's type, or the body is not a JSON object.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Event validation failed: location is required",
            "details": {"field": "location"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class DuplicateKeyError(ValidationError):
    """
    Raised when a write would violate a uniqueness constraint.

    Only Volunteer.email is unique; events and activities never raise this.
    HTTP:    400 Bad Request, error code "duplicate_key"
    """

    def __init__(
        self,
        message: str = "Duplicate key",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, field=field, context=context)


class NotFoundError(NSSManagementError):
    """
    Raised when a record id does not match any stored record.

    A lookup miss is an expected outcome; the service converts the store's
    None into this exception so the handler can answer 404.

    Message format matches the public API: "Volunteer not found".
    """

    def __init__(
        self,
        resource: str = "Record",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)


class DatabaseError(NSSManagementError):
    """
    Raised when a store operation fails for a reason other than validation.

    What:    Connectivity loss, malformed identifiers, unexpected driver errors.
    HTTP:    500 Internal Server Error

    The message is the raw error text of the underlying failure; the API
    reports it to the client as-is.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
