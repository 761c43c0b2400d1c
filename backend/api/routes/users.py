"""
User account endpoints.

Signup and login are public and return ``{token, email}``; ``/me``
requires a bearer token.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from modules.auth.exceptions import UserNotFoundError
from modules.auth.interfaces import IAuthService
from modules.auth.models import AuthResponse, UserProfile
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service
from ..middleware.auth import get_current_user

router = APIRouter()


@router.post("/signup", response_model=AuthResponse, status_code=201)
async def signup(
    payload: dict[str, Any] = Body(...),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Create an account.

    The raw body goes to the credential validator, which reports the
    first missing or invalid field.
    """
    return await auth.signup(payload)


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: dict[str, Any] = Body(...),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Exchange email and password for a token."""
    return await auth.login(payload)


@router.get("/me", response_model=UserProfile)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
) -> UserProfile:
    """
    Get the current user's profile.

    Requires authentication. A token whose account no longer exists is
    rejected like any other invalid token.
    """
    profile = await auth.get_user_by_id(user.id)
    if profile is None:
        raise UserNotFoundError(user.id)
    return profile
