"""Custom exceptions for the TenderDesk application."""

from __future__ import annotations

from typing import Any


class TenderDeskException(Exception):
    """Base exception for TenderDesk application."""

    pass


class ValidationError(TenderDeskException):
    """Raised when validation fails."""

    pass


class NotFoundError(TenderDeskException):
    """Raised when a resource is not found."""

    pass


class ConflictError(TenderDeskException):
    """Raised when a uniqueness or referential guard blocks a write.

    ``details`` is merged into the error body so callers can report, for
    example, how many users still hold a role.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})


class DatabaseError(TenderDeskException):
    """Raised when a database operation fails."""

    pass


class ConfigurationError(TenderDeskException):
    """Raised when configuration is invalid."""

    pass


class AuthenticationError(TenderDeskException):
    """Raised when authentication fails."""

    pass
