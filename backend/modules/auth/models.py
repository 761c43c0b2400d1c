"""
Authentication module data models.

Wire-facing models use camelCase aliases (``phoneNumber``, ``zipCode``)
because that is what the browser client sends and expects back.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Address(CamelModel):
    """Structured postal address of a user."""

    street: str
    city: str
    state: str
    zip_code: str


class SignupCredentials(CamelModel):
    """Validated and normalized signup input."""

    name: str
    email: EmailStr
    password: str = Field(..., repr=False)
    phone_number: str
    gender: str
    date_of_birth: date
    address: Address


class LoginCredentials(CamelModel):
    """Validated login input."""

    email: str
    password: str = Field(..., repr=False)


class NewUser(CamelModel):
    """A user ready to be persisted. Carries the digest, never the plaintext."""

    name: str
    email: EmailStr
    password_hash: str = Field(..., repr=False)
    phone_number: str
    gender: str
    date_of_birth: date
    address: Address


class UserProfile(CamelModel):
    """Public view of a user record (no credential)."""

    id: str = Field(..., description="User ID (UUID)")
    name: str
    email: EmailStr
    phone_number: str
    gender: str
    date_of_birth: date
    address: Address
    created_at: Optional[datetime] = None


class UserRecord(UserProfile):
    """Stored user record including the password digest."""

    password_hash: str = Field(..., repr=False)

    def to_profile(self) -> UserProfile:
        """Drop the credential before the record leaves the service."""
        return UserProfile(**self.model_dump(exclude={"password_hash"}))


class TokenPayload(BaseModel):
    """Decoded session token claims."""

    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="User's email")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class AuthResponse(BaseModel):
    """Response body of a successful signup or login."""

    token: str
    email: str
