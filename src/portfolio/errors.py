from abc import ABC
from typing_extensions import TypedDict


class FieldError(TypedDict):
    """Single field-level validation problem."""

    field: str
    message: str


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message)


class AuthenticationError(UserError):
    """Raised when authentication fails or the session is missing, expired or dangling."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation."""

    def __init__(self, message: str = "Invalid request data", errors: list[FieldError] | None = None) -> None:
        super().__init__(message)
        self.errors: list[FieldError] = errors or []


class ConflictError(UserError):
    """Raised when a unique key (username, slug) is already taken."""


class InternalError(Exception):
    """Raised on an unexpected store fault. Never shown to the user."""
