"""
Bearer token authentication gate.

Extracts the token from ``Authorization: Bearer <token>``, verifies it
and hands the resolved identity to the route. Every rejection is a 401
with the same message; the specific failure kind is only logged.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from modules.auth.exceptions import (
    InvalidCredentialError,
    InvalidTokenError,
    MissingCredentialError,
)
from modules.auth.interfaces import IAuthService
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

# Declares the scheme in OpenAPI. It matches the scheme name case-insensitively
# and tolerates extra spaces, so the raw header is checked again below.
bearer_scheme = HTTPBearer(auto_error=False)


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an Authorization header value.

    The header must start with exactly ``Bearer `` and carry a non-empty
    token. Anything else is treated as no credential at all.

    Raises:
        MissingCredentialError: Header absent, wrong scheme or empty token
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise MissingCredentialError()

    token = authorization[len(BEARER_PREFIX):]
    if not token or token != token.strip():
        raise MissingCredentialError()
    return token


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.post("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    try:
        if credentials is None or credentials.scheme != BEARER_PREFIX.strip():
            raise MissingCredentialError()
        token = extract_bearer_token(request.headers.get("Authorization"))
    except MissingCredentialError:
        logger.debug("Rejected request: no bearer credential")
        raise

    try:
        return await auth.validate_token(token)
    except InvalidTokenError as e:
        logger.info("Rejected request: %s", e.code)
        raise InvalidCredentialError() from e

