"""
Property listing service implementation.
"""

import logging
import uuid

from .exceptions import InvalidPropertyIdError, PropertyNotFoundError
from .interfaces import IPropertyService
from .models import Property, PropertyCreate, PropertyUpdate
from .repository import PropertyRepository

logger = logging.getLogger(__name__)


def parse_property_id(property_id: str) -> str:
    """Return the canonical UUID string or raise ``InvalidPropertyIdError``."""
    try:
        return str(uuid.UUID(property_id))
    except (ValueError, TypeError, AttributeError):
        raise InvalidPropertyIdError(property_id)


class PropertyService(IPropertyService):
    """Listing CRUD over the property repository."""

    def __init__(self, repository: PropertyRepository):
        self._repo = repository

    async def list_properties(self) -> list[Property]:
        return await self._repo.list_all()

    async def get_property(self, property_id: str) -> Property:
        listing = await self._repo.get_by_id(parse_property_id(property_id))
        if listing is None:
            raise PropertyNotFoundError(property_id)
        return listing

    async def create_property(self, request: PropertyCreate) -> Property:
        listing = await self._repo.create(request)
        logger.info("Created property %s", listing.id)
        return listing

    async def update_property(self, property_id: str, request: PropertyUpdate) -> Property:
        canonical_id = parse_property_id(property_id)
        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        listing = await self._repo.update(canonical_id, changes)
        if listing is None:
            raise PropertyNotFoundError(property_id)
        return listing

    async def delete_property(self, property_id: str) -> None:
        if not await self._repo.delete(parse_property_id(property_id)):
            raise PropertyNotFoundError(property_id)
        logger.info("Deleted property %s", property_id)
