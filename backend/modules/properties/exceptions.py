"""
Properties module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class InvalidPropertyIdError(ValidationError):
    """Raised when a property identifier is not a valid UUID."""

    def __init__(self, property_id: str):
        super().__init__(
            "Invalid property ID",
            code="INVALID_PROPERTY_ID",
            details={"property_id": property_id},
        )


class PropertyNotFoundError(NotFoundError):
    """Raised when a property is not found."""

    def __init__(self, property_id: str):
        super().__init__(
            "Property not found",
            code="PROPERTY_NOT_FOUND",
            details={"property_id": property_id},
        )


class InvalidPropertyBodyError(ValidationError):
    """Raised when a listing body is not valid JSON or fails validation."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_PROPERTY_BODY")
