"""
crud-api Backend — Custom Exception Hierarchy
==============================================

What:  Defines application-specific exceptions for the few ways a request fails.
Why:   Services raise typed errors; global handlers registered in main.py turn
       them into HTTP responses so no route needs its own try/except.
How:   Each exception carries a message and an optional context dict.
       The message is what the client sees; the context is only logged.

Exception Hierarchy:
    CrudApiError (base)
    ├── StoreError               → 500, message as text/plain
    │   └── RecordNotFoundError  → 500 (update of a missing record)
    └── PayloadError             → 400, request body could not be parsed

There is deliberately no 404 kind: a lookup that finds nothing is a
successful response with a null body, and only Update treats a missing
record as a failed store operation.
"""

from typing import Any, Dict, Optional


class CrudApiError(Exception):
    """
    Base exception for all crud-api application errors.

    Attributes:
        message:  Client-facing error description (returned as the response body)
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


class StoreError(CrudApiError):
    """
    Raised when a record store operation fails.

    What:    A query, insert, update, delete or commit failed, a value could
             not be cast to its column type, or an identifier was malformed.
    HTTP:    500 Internal Server Error, body is `message` as plain text.

    The message is the underlying failure's own message, so callers see
    the same text the store reported.
    """

    def __init__(
        self,
        message: str = "Record store operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RecordNotFoundError(StoreError):
    """
    Raised when Update targets a record that does not exist.

    Update is a find-then-save sequence; saving an absent record is a failed
    store operation, so this still maps to 500 rather than 404.
    """

    def __init__(
        self,
        resource: str = "record",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"Cannot update {resource}: no {resource} found"
        if resource_id:
            message = f"Cannot update {resource}: no {resource} with _id '{resource_id}'"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class PayloadError(CrudApiError):
    """
    Raised when a request body cannot be parsed at all.

    What:    Body is not valid JSON, or is JSON but not an object.
    HTTP:    400 Bad Request, plain text.

    This is body parsing, not validation: field names and types are never
    inspected here.
    """

    def __init__(
        self,
        message: str = "Request body could not be parsed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
