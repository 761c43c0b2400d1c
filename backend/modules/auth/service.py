"""
Authentication service implementation.

Orchestrates signup and login over the credential validator, password
hasher, user repository and token service, and resolves bearer tokens
into authenticated users.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from shared.models import AuthenticatedUser

from .exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    MissingCredentialError,
)
from .interfaces import IAuthService, ILoginAttemptLimiter, IUserRepository
from .limiter import NoopLoginAttemptLimiter
from .models import AuthResponse, NewUser, UserProfile
from .passwords import PasswordHasher
from .tokens import TokenService
from .validators import (
    DEFAULT_PASSWORD_POLICY,
    PasswordPolicy,
    validate_login,
    validate_signup,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Stateless per request: every collaborator is injected at startup and
    no session state is kept between calls. bcrypt work runs in a worker
    thread so concurrent requests are not serialized on the event loop.
    """

    def __init__(
        self,
        users: IUserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
        password_policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY,
        limiter: Optional[ILoginAttemptLimiter] = None,
    ):
        self._users = users
        self._hasher = hasher
        self._tokens = tokens
        self._policy = password_policy
        self._limiter = limiter or NoopLoginAttemptLimiter()

    async def signup(self, payload: Mapping[str, Any]) -> AuthResponse:
        """
        Validate, check uniqueness, hash, persist, then issue a token.
        The response echoes the email as submitted; the account and the
        token carry the normalized form.

        Every rejection happens before hashing or persistence, except a
        lost race on the unique email which the repository reports.
        """
        credentials = validate_signup(payload, self._policy)

        if await self._users.get_by_email(credentials.email) is not None:
            logger.info("Signup rejected: email already registered")
            raise DuplicateEmailError(credentials.email)

        password_hash = await asyncio.to_thread(self._hasher.hash, credentials.password)
        user = await self._users.create(
            NewUser(
                name=credentials.name,
                email=credentials.email,
                password_hash=password_hash,
                phone_number=credentials.phone_number,
                gender=credentials.gender,
                date_of_birth=credentials.date_of_birth,
                address=credentials.address,
            )
        )

        logger.info("Registered user %s", user.id)
        return AuthResponse(token=self._tokens.issue(user.id, user.email), email=payload["email"])

    async def login(self, payload: Mapping[str, Any]) -> AuthResponse:
        """
        Verify email and password and issue a token.

        Unknown email and wrong password fail identically, and both pay
        for one bcrypt verification.
        """
        credentials = validate_login(payload)
        await self._limiter.check(credentials.email)

        user = await self._users.get_by_email(credentials.email)
        if user is None:
            await asyncio.to_thread(self._hasher.verify_dummy, credentials.password)
            verified = False
        else:
            verified = await asyncio.to_thread(
                self._hasher.verify, credentials.password, user.password_hash
            )

        if user is None or not verified:
            await self._limiter.record_failure(credentials.email)
            logger.info(
                "Login failed: %s", "unknown email" if user is None else "wrong password"
            )
            raise InvalidCredentialsError()

        await self._limiter.record_success(credentials.email)
        logger.info("Login: %s", user.id)
        return AuthResponse(token=self._tokens.issue(user.id, user.email), email=payload["email"])

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a token and return the authenticated user.

        Verifier failures propagate with their specific kind
        (malformed, bad signature, expired).
        """
        if not token:
            raise MissingCredentialError()

        payload = self._tokens.verify(token)
        return AuthenticatedUser(
            id=payload.sub,
            email=payload.email,
            issued_at=datetime.fromtimestamp(payload.iat, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload.exp, tz=timezone.utc),
        )

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        """Get a user's profile by their ID."""
        user = await self._users.get_by_id(user_id)
        return user.to_profile() if user else None
