"""
Shared infrastructure for the Realty backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Async SQLAlchemy engine and session factory
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import Base, Database
from .exceptions import (
    AppError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "Base",
    "Database",
    "AppError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthenticatedUser",
]
