"""
Notes API — Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for the outcomes a request can have.
Why:   Each outcome maps to one HTTP status and one JSON body shape.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the right status code.
Who:   Raised by validators, the note service and the store client.
When:  During request processing.

Exception Hierarchy:
    NotesAPIError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found
    ├── ConflictError     → 409 Conflict
    └── StoreError        → 500 Internal Server Error (detail logged only)
"""

from typing import Any, Dict, Optional


class NotesAPIError(Exception):
    """
    Base exception for all Notes API errors.

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


class ValidationError(NotesAPIError):
    """
    Raised when client input fails validation.

    What:    The client sent a payload, id or query value that can be corrected.
    HTTP:    400 Bad Request

    Only the first failing field is reported.

    Example response:
        {
            "success": false,
            "error": "validation_error",
            "message": "text: Field required",
            "details": {"field": "text"}
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


class NotFoundError(NotesAPIError):
    """
    Raised when a requested resource does not exist.

    What:    No note exists for the requested id.
    When:    GET/PUT/DELETE /{id} with an id the store does not know.
    HTTP:    404 Not Found

    The store returns None for missing rows; the service converts that into
    this exception so routes never branch on None.
    """

    def __init__(
        self,
        resource: str = "note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)


class ConflictError(NotesAPIError):
    """
    Raised when a create would duplicate an existing note.

    When:    PREVENT_DUPLICATE_NOTES is on and a note with the same text exists.
    HTTP:    409 Conflict
    """

    def __init__(
        self,
        message: str = "already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StoreError(NotesAPIError):
    """
    Raised when the persistence backend fails.

    What:    A query, insert, update, delete or commit failed.
    HTTP:    500 Internal Server Error

    Security Note:
        The message is always generic. The driver exception is chained
        (``raise ... from``) and its type recorded in ``context`` for the
        server log; neither is ever returned to the API consumer.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
