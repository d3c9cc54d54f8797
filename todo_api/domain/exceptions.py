"""
Error taxonomy for the To-do API.

Use cases and repositories raise these; the HTTP layer turns each one into a
JSON ``{"error": message}`` response with the matching status code.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import ClassVar


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class TodoApiError(Exception):
    """Base exception for all To-do API errors."""

    status_code: ClassVar[int] = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class InvalidPayloadError(TodoApiError):
    """Raised when a payload fails its schema."""
    status_code = 400


class UnauthorizedError(TodoApiError):
    """Raised on bad credentials (unknown email or wrong password alike)."""
    status_code = 401


class ForbiddenError(TodoApiError):
    """Raised when the caller does not own the task."""
    status_code = 403


class NotFoundError(TodoApiError):
    """Raised when an identifier matches nothing."""
    status_code = 404


class ConflictError(TodoApiError):
    """Raised when a unique key already exists."""
    status_code = 409


# -----------------------------------------------------------------------------
# Database
# -----------------------------------------------------------------------------


class StoreError(TodoApiError):
    """Raised when the underlying store fails. Carries the driver message."""
    status_code = 500
