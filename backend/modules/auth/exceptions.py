"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers to return appropriate HTTP responses. Input problems are
``ValidationError`` (400); token problems are ``AuthenticationError`` (401).
"""

from shared.exceptions import AuthenticationError, ValidationError


# ---------------------------------------------------------------------------
# Credential validation (signup / login input)
# ---------------------------------------------------------------------------


class CredentialValidationError(ValidationError):
    """Base class for rejected signup or login input."""

    pass


class MissingFieldError(CredentialValidationError):
    """Raised when a required field is absent or blank."""

    def __init__(self, field: str):
        super().__init__(
            f"Missing required field: {field}",
            code="MISSING_FIELD",
            details={"field": field},
        )
        self.field = field


class InvalidEmailError(CredentialValidationError):
    """Raised when the email is not a syntactically valid address."""

    def __init__(self, message: str = "Email is not valid"):
        super().__init__(message, code="INVALID_EMAIL")


class WeakPasswordError(CredentialValidationError):
    """Raised when the password does not meet the strength policy."""

    def __init__(self, message: str = "Password is not strong enough"):
        super().__init__(message, code="WEAK_PASSWORD")


class InvalidFieldError(CredentialValidationError):
    """Raised when a present field has an unusable value."""

    def __init__(self, field: str):
        super().__init__(
            f"Invalid value for field: {field}",
            code="INVALID_FIELD",
            details={"field": field},
        )
        self.field = field


class DuplicateEmailError(ValidationError):
    """Raised when an account already exists for the email."""

    def __init__(self, email: str):
        super().__init__(
            "Email already in use",
            code="DUPLICATE_EMAIL",
            details={"email": email},
        )


class InvalidCredentialsError(ValidationError):
    """
    Raised when login fails.

    Unknown email and wrong password share this error and its message.
    """

    def __init__(self, message: str = "Incorrect email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


# ---------------------------------------------------------------------------
# Tokens and the auth gate
# ---------------------------------------------------------------------------


class InvalidTokenError(AuthenticationError):
    """Raised when a token fails verification."""

    def __init__(self, message: str = "Invalid authentication token", code: str = "INVALID_TOKEN"):
        super().__init__(message, code=code)


class MalformedTokenError(InvalidTokenError):
    """Raised when a token cannot be decoded or lacks required claims."""

    def __init__(self, message: str = "Malformed authentication token"):
        super().__init__(message, code="MALFORMED_TOKEN")


class BadSignatureError(InvalidTokenError):
    """Raised when a token signature does not match the signing secret."""

    def __init__(self, message: str = "Authentication token signature mismatch"):
        super().__init__(message, code="BAD_SIGNATURE")


class ExpiredTokenError(InvalidTokenError):
    """Raised when a token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingCredentialError(AuthenticationError):
    """Raised by the gate when no usable bearer token is presented."""

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, code="MISSING_CREDENTIAL")


class InvalidCredentialError(AuthenticationError):
    """Raised by the gate when the presented token fails verification."""

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, code="INVALID_CREDENTIAL")


class UserNotFoundError(AuthenticationError):
    """Raised when the authenticated user doesn't exist in the database."""

    def __init__(self, user_id: str):
        super().__init__(
            "Not authorized",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )
