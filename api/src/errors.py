"""
Domain and store exceptions raised by repositories and services.

Each exception carries the message returned to the client and the HTTP
status it maps to. The legacy mapping reports domain failures as 401;
``strict_status_code`` holds the conventional code used when
``Settings.strict_status_codes`` is enabled.
"""

from typing import Optional

from fastapi import status


class ApiError(Exception):
    """Base class for errors converted to a ``{"message": ...}`` response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    strict_status_code: Optional[int] = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def status_for(self, strict: bool) -> int:
        """Return the HTTP status for the configured mapping."""
        if strict and self.strict_status_code is not None:
            return self.strict_status_code
        return self.status_code


class NotFoundError(ApiError):
    """Lookup by id or username matched no document."""

    status_code = status.HTTP_401_UNAUTHORIZED
    strict_status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ApiError):
    """A unique-by-convention value is already taken."""

    status_code = status.HTTP_401_UNAUTHORIZED
    strict_status_code = status.HTTP_409_CONFLICT


class InvalidCredentialsError(ApiError):
    """Unknown username or wrong password. Both look the same to the caller."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Invalid username and/or password."):
        super().__init__(message)


class StoreError(ApiError):
    """The document store rejected or failed an operation."""

    status_code = status.HTTP_501_NOT_IMPLEMENTED

    def __init__(self, cause: Exception, collection: str = "", operation: str = ""):
        super().__init__(f"MongoDB Exception: {cause}")
        self.cause = cause
        self.collection = collection
        self.operation = operation
