"""
Authentication module.

Handles account creation, login, password hashing, session tokens and
the user store.

Public API:
- IAuthService: Interface for auth operations
- IUserRepository, ILoginAttemptLimiter: Collaborator interfaces
- AuthResponse, UserProfile, TokenPayload: Data models
- Auth exceptions: MissingFieldError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService, ILoginAttemptLimiter, IUserRepository
from .models import AuthResponse, UserProfile, TokenPayload
from .exceptions import (
    CredentialValidationError,
    MissingFieldError,
    InvalidEmailError,
    WeakPasswordError,
    InvalidFieldError,
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidTokenError,
    MalformedTokenError,
    BadSignatureError,
    ExpiredTokenError,
    MissingCredentialError,
    InvalidCredentialError,
    UserNotFoundError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "ILoginAttemptLimiter",
    "IUserRepository",
    # Models
    "AuthResponse",
    "UserProfile",
    "TokenPayload",
    # Exceptions
    "CredentialValidationError",
    "MissingFieldError",
    "InvalidEmailError",
    "WeakPasswordError",
    "InvalidFieldError",
    "DuplicateEmailError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MalformedTokenError",
    "BadSignatureError",
    "ExpiredTokenError",
    "MissingCredentialError",
    "InvalidCredentialError",
    "UserNotFoundError",
]
