"""
Travel Diary Backend — Custom Exception Hierarchy
==================================================

What:  The closed set of error variants produced by the data-access layer.
How:   Each exception carries a client-facing message, a debug context dict,
       and the HTTP status it maps to. `travel_diary.main` registers one
       handler for the base class that turns any variant into
       `{"message": ...}` with that status.
Who:   Raised by services; caught by the handlers in `main.py`.

Exception Hierarchy:
    TravelDiaryError (base)
    ├── NotFoundError             → 404 Not Found
    ├── ConstraintViolationError  → 400 Bad Request (write rejected by storage)
    └── StorageFailureError       → 500 Internal Server Error (read failed)

Messages:
    NotFoundError carries a fixed message ("User not found"). The other two
    carry the storage engine's own error text, e.g.
    "NOT NULL constraint failed: users.email".
"""

from typing import Any, Dict, Optional


# Entry creation reports a missing author and a missing location the same way
USER_NOT_FOUND = "User not found"
ENTRY_REFERENCE_NOT_FOUND = "Author or location not found"


class TravelDiaryError(Exception):
    """
    Base exception for all Travel Diary application errors.

    Attributes:
        message:  Client-facing error description (returned as `message`)
        context:  Additional debug info (logged, never returned to client)
        status_code:  HTTP status the centralized handler responds with
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(TravelDiaryError):
    """
    Raised when a requested or referenced row does not exist.

    When:    GET /users/{id} with an unknown id; POST /diaryentries whose
             author_id or location_id has no matching row.
    HTTP:    404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        message: str,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class ConstraintViolationError(TravelDiaryError):
    """
    Raised when the storage engine rejects a write.

    When:    NOT NULL violation on insert (field omitted from the body),
             type/constraint errors, or any other storage failure while
             serving a POST.
    HTTP:    400 Bad Request
    """

    status_code = 400


class StorageFailureError(TravelDiaryError):
    """
    Raised when a read query fails unexpectedly.

    When:    Database file unreadable, table missing, driver error on SELECT.
    HTTP:    500 Internal Server Error
    """

    status_code = 500
