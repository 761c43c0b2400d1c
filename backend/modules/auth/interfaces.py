"""
Authentication module interfaces.

Other modules and the API layer should depend on these protocols, not
the concrete implementations. This enables testing with mocks and
swapping the storage engine.
"""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import AuthResponse, NewUser, UserProfile, UserRecord


@runtime_checkable
class IUserRepository(Protocol):
    """Persistence of user records keyed by unique email."""

    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        """Return the user with this normalized email, or None."""
        ...

    async def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Return the user with this ID, or None."""
        ...

    async def create(self, user: NewUser) -> UserRecord:
        """
        Persist a new user.

        Raises:
            DuplicateEmailError: If the email is taken. Must be atomic:
                of two concurrent creates for one email, exactly one wins.
        """
        ...


@runtime_checkable
class ILoginAttemptLimiter(Protocol):
    """
    Hook for throttling repeated failed logins.

    ``check`` may raise an ``AppError`` subclass to refuse the attempt
    before any password work is done.
    """

    async def check(self, email: str) -> None:
        ...

    async def record_failure(self, email: str) -> None:
        ...

    async def record_success(self, email: str) -> None:
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer.
    """

    async def signup(self, payload: Mapping[str, Any]) -> AuthResponse:
        """
        Create an account and issue a token.

        Args:
            payload: Raw signup body

        Returns:
            AuthResponse with token and normalized email

        Raises:
            CredentialValidationError: If the input is rejected
            DuplicateEmailError: If the email is already registered
        """
        ...

    async def login(self, payload: Mapping[str, Any]) -> AuthResponse:
        """
        Check credentials and issue a token.

        Raises:
            MissingFieldError: If email or password is absent
            InvalidCredentialsError: Unknown email or wrong password
        """
        ...

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a bearer token and return the authenticated user.

        Raises:
            MissingCredentialError: If token is empty
            InvalidTokenError: If token is malformed, mis-signed or expired
        """
        ...

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        """Get a user's profile by ID, or None."""
        ...
