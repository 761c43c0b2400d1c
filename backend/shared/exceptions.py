"""
Base exception classes for the Realty backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to an HTTP status code.
"""

from typing import Optional, Any


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


class ValidationError(AppError):
    """Input validation failed."""

    status_code = 400


class AuthenticationError(AppError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class NotFoundError(AppError):
    """Resource not found."""

    status_code = 404
