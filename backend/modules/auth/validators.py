"""
Credential validation for signup and login payloads.

Pure functions: they take the raw JSON body, return a normalized pydantic
model, and raise a ``CredentialValidationError`` subclass on the first
problem found. Checks run in a fixed order: required fields, email
syntax, password strength, then the remaining field formats.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .exceptions import (
    InvalidEmailError,
    InvalidFieldError,
    MissingFieldError,
    WeakPasswordError,
)
from .models import LoginCredentials, SignupCredentials

SIGNUP_FIELDS = (
    "name",
    "email",
    "password",
    "phoneNumber",
    "gender",
    "dateOfBirth",
    "address",
)
ADDRESS_FIELDS = ("street", "city", "state", "zipCode")
LOGIN_FIELDS = ("email", "password")

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72

_email_adapter = TypeAdapter(EmailStr)


@dataclass(frozen=True)
class PasswordPolicy:
    """Minimum password strength requirements."""

    min_length: int = 8
    require_lowercase: bool = True
    require_uppercase: bool = True
    require_digit: bool = True
    require_symbol: bool = True
    max_bytes: int = BCRYPT_MAX_BYTES


DEFAULT_PASSWORD_POLICY = PasswordPolicy()


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def require_fields(payload: Mapping[str, Any], fields: tuple[str, ...], prefix: str = "") -> None:
    """Raise ``MissingFieldError`` for the first absent or blank field."""
    for field in fields:
        if _is_missing(payload.get(field)):
            raise MissingFieldError(f"{prefix}{field}")


def normalize_email(email: str) -> str:
    """Case-normalize an email so it can serve as the unique key."""
    return email.strip().lower()


def validate_email(email: Any) -> str:
    """Return the normalized email or raise ``InvalidEmailError``."""
    if not isinstance(email, str):
        raise InvalidEmailError()
    normalized = normalize_email(email)
    try:
        _email_adapter.validate_python(normalized)
    except PydanticValidationError:
        raise InvalidEmailError()
    return normalized


def check_password_strength(password: Any, policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY) -> str:
    """
    Enforce the password policy.

    Returns:
        The password, unchanged.

    Raises:
        WeakPasswordError: naming the first rule the password breaks.
    """
    if not isinstance(password, str):
        raise WeakPasswordError()
    if len(password) < policy.min_length:
        raise WeakPasswordError(
            f"Password must be at least {policy.min_length} characters long"
        )
    if len(password.encode("utf-8")) > policy.max_bytes:
        raise WeakPasswordError(
            f"Password must be at most {policy.max_bytes} bytes long"
        )
    if policy.require_lowercase and not any(c.islower() for c in password):
        raise WeakPasswordError("Password must contain a lowercase letter")
    if policy.require_uppercase and not any(c.isupper() for c in password):
        raise WeakPasswordError("Password must contain an uppercase letter")
    if policy.require_digit and not any(c.isdigit() for c in password):
        raise WeakPasswordError("Password must contain a digit")
    if policy.require_symbol and all(c.isalnum() for c in password):
        raise WeakPasswordError("Password must contain a symbol")
    return password


def validate_signup(
    payload: Mapping[str, Any],
    policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY,
) -> SignupCredentials:
    """
    Validate a raw signup body.

    Args:
        payload: Decoded JSON body as sent by the client (camelCase keys).
        policy: Password strength policy to enforce.

    Returns:
        SignupCredentials with the email normalized.

    Raises:
        MissingFieldError, InvalidEmailError, WeakPasswordError,
        InvalidFieldError
    """
    if not isinstance(payload, Mapping):
        raise InvalidFieldError("body")

    require_fields(payload, SIGNUP_FIELDS)
    address = payload["address"]
    if not isinstance(address, Mapping):
        raise InvalidFieldError("address")
    require_fields(address, ADDRESS_FIELDS, prefix="address.")

    email = validate_email(payload["email"])
    check_password_strength(payload["password"], policy)

    data = {field: payload[field] for field in SIGNUP_FIELDS}
    data["email"] = email
    data["address"] = {field: address[field] for field in ADDRESS_FIELDS}
    try:
        return SignupCredentials.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        raise InvalidFieldError(".".join(str(part) for part in first["loc"]))


def validate_login(payload: Mapping[str, Any]) -> LoginCredentials:
    """
    Validate a raw login body.

    Only presence is checked; a malformed email simply fails to match
    any account.
    """
    if not isinstance(payload, Mapping):
        raise InvalidFieldError("body")

    require_fields(payload, LOGIN_FIELDS)
    email, password = payload["email"], payload["password"]
    if not isinstance(email, str):
        raise InvalidFieldError("email")
    if not isinstance(password, str):
        raise InvalidFieldError("password")
    return LoginCredentials(email=normalize_email(email), password=password)
