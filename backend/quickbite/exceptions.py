"""
QuickBite Backend: Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions, one per error category the API exposes.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) turn them into
       `{"error": message}` JSON responses with the matching status code.
Who:   Raised by services and data stores; caught by global handlers.

Exception Hierarchy:
    QuickBiteError (base)
    ├── ValidationError   → 400 Bad Request (missing or blank required fields)
    ├── AuthError         → 401 Unauthorized (bad credentials or token)
    ├── NotFoundError     → 404 Not Found
    ├── StorageError      → 400 Bad Request (remote data store refused the call)
    └── InternalError     → 500 Internal Server Error

Messages are returned to the client as-is. The store's own error text
(duplicate key, malformed id, ...) is what the frontend displays.
"""

from typing import Any, Dict, Optional


class QuickBiteError(Exception):
    """
    Base exception for all QuickBite application errors.

    Attributes:
        message:  Client-facing error description (returned in the response)
        context:  Additional debug info (logged, never returned)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(QuickBiteError):
    """
    Raised when client input is missing a required value.

    HTTP: 400 Bad Request

    Also used for request bodies FastAPI rejects before a handler runs
    (see the RequestValidationError handler in main.py), so every input
    problem answers with the same status and shape.
    """

    status_code = 400

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


class AuthError(QuickBiteError):
    """
    Raised when credentials or a bearer token are rejected.

    HTTP: 401 Unauthorized
    """

    status_code = 401

    def __init__(
        self,
        message: str = "Invalid credentials",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(QuickBiteError):
    """
    Raised when a requested resource does not exist.

    HTTP: 404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StorageError(QuickBiteError):
    """
    Raised when the remote data store fails or refuses an operation.

    When:  Unique-constraint violation on insert, malformed id in a filter,
           `select_one` matching zero or several rows, network failure.
    HTTP:  400 Bad Request

    The message is the store's own text, so duplicate-email registrations
    read as the store reports them.
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Data store operation failed",
        table: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if table:
            ctx["table"] = table
        super().__init__(message=message, context=ctx)
        self.table = table


class InternalError(QuickBiteError):
    """
    Raised when an operation fails for a reason the service did not anticipate.

    HTTP: 500 Internal Server Error
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
