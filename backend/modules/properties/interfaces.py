"""
Properties module interface.

The API layer depends on IPropertyService for all listing operations.
"""

from typing import Protocol, runtime_checkable

from .models import Property, PropertyCreate, PropertyUpdate


@runtime_checkable
class IPropertyService(Protocol):
    """Interface for listing operations."""

    async def list_properties(self) -> list[Property]:
        """All listings, newest first."""
        ...

    async def get_property(self, property_id: str) -> Property:
        """
        Get a listing by ID.

        Raises:
            InvalidPropertyIdError: If the ID is not a UUID
            PropertyNotFoundError: If no listing has this ID
        """
        ...

    async def create_property(self, request: PropertyCreate) -> Property:
        """Create a listing."""
        ...

    async def update_property(self, property_id: str, request: PropertyUpdate) -> Property:
        """
        Apply a partial update.

        Raises:
            InvalidPropertyIdError, PropertyNotFoundError
        """
        ...

    async def delete_property(self, property_id: str) -> None:
        """
        Delete a listing.

        Raises:
            InvalidPropertyIdError, PropertyNotFoundError
        """
        ...
