"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations from the settings
and database built at startup.

The container lives on ``app.state.container`` so every app instance
(and every test) owns its own engine and services.
"""

from datetime import timedelta
from typing import TYPE_CHECKING

from fastapi import Request

from shared.config import Settings
from shared.database import Database

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService, IUserRepository
    from modules.auth.passwords import PasswordHasher
    from modules.auth.tokens import TokenService
    from modules.properties.interfaces import IPropertyService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    """

    def __init__(self, settings: Settings, database: Database) -> None:
        self.settings = settings
        self.database = database
        self._hasher: "PasswordHasher | None" = None
        self._tokens: "TokenService | None" = None
        self._user_repository: "IUserRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._property_service: "IPropertyService | None" = None

    @property
    def hasher(self) -> "PasswordHasher":
        """Get the password hasher."""
        if self._hasher is None:
            from modules.auth.passwords import PasswordHasher
            self._hasher = PasswordHasher(rounds=self.settings.bcrypt_rounds)
        return self._hasher

    @property
    def tokens(self) -> "TokenService":
        """Get the token issuer/verifier."""
        if self._tokens is None:
            from modules.auth.tokens import TokenService
            self._tokens = TokenService(
                secret=self.settings.jwt_secret,
                expiry=timedelta(hours=self.settings.jwt_expiry_hours),
                algorithm=self.settings.jwt_algorithm,
            )
        return self._tokens

    @property
    def user_repository(self) -> "IUserRepository":
        """Get the user repository."""
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            self._user_repository = UserRepository(self.database.session_factory)
        return self._user_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            from modules.auth.validators import PasswordPolicy
            self._auth_service = AuthService(
                users=self.user_repository,
                hasher=self.hasher,
                tokens=self.tokens,
                password_policy=PasswordPolicy(min_length=self.settings.password_min_length),
            )
        return self._auth_service

    @property
    def properties(self) -> "IPropertyService":
        """Get the property service instance."""
        if self._property_service is None:
            from modules.properties.repository import PropertyRepository
            from modules.properties.service import PropertyService
            self._property_service = PropertyService(
                PropertyRepository(self.database.session_factory)
            )
        return self._property_service


def get_container(request: Request) -> ServiceContainer:
    """Get the container of the app serving this request."""
    return request.app.state.container


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service(request: Request) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container(request).auth


def get_property_service(request: Request) -> "IPropertyService":
    """FastAPI dependency for property service."""
    return get_container(request).properties
