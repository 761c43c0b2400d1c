"""
Property repository for database access.

Encapsulates all SQLAlchemy queries and data mapping for the
``properties`` table.
"""

from typing import Any, Optional

from sqlalchemy import select

from shared.repository import BaseRepository

from .models import Location, Property, PropertyCreate
from .tables import PropertyRow

_LOCATION_COLUMNS = ("address", "city", "state")


class PropertyRepository(BaseRepository[Property]):
    """
    Repository for listing data access.

    Note: This repository does NOT validate identifiers.
    The service layer is responsible for that.
    """

    async def list_all(self) -> list[Property]:
        async with self._sessions() as session:
            result = await session.execute(
                select(PropertyRow).order_by(PropertyRow.created_at.desc())
            )
            return [self._map_to_property(row) for row in result.scalars()]

    async def get_by_id(self, property_id: str) -> Optional[Property]:
        async with self._sessions() as session:
            row = await session.get(PropertyRow, property_id)
            return self._map_to_property(row) if row else None

    async def create(self, data: PropertyCreate) -> Property:
        row = PropertyRow(**self._to_columns(data.model_dump()))
        async with self._sessions() as session:
            session.add(row)
            await session.commit()
            return self._map_to_property(row)

    async def update(self, property_id: str, changes: dict[str, Any]) -> Optional[Property]:
        """
        Apply field changes to a listing.

        Args:
            property_id: The listing ID.
            changes: Snake-case field values; ``location`` may be a dict.

        Returns:
            The updated listing, or None if it does not exist.
        """
        async with self._sessions() as session:
            row = await session.get(PropertyRow, property_id)
            if row is None:
                return None
            for column, value in self._to_columns(changes).items():
                setattr(row, column, value)
            await session.commit()
            await session.refresh(row)
            return self._map_to_property(row)

    async def delete(self, property_id: str) -> bool:
        """Delete a listing. Returns False if it did not exist."""
        async with self._sessions() as session:
            row = await session.get(PropertyRow, property_id)
            if row is None:
                return False
            await session.delete(row)
            await session.commit()
            return True

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _to_columns(data: dict[str, Any]) -> dict[str, Any]:
        columns = dict(data)
        location = columns.pop("location", None)
        if location:
            for key in _LOCATION_COLUMNS:
                columns[key] = location[key]
        return columns

    @staticmethod
    def _map_to_property(row: PropertyRow) -> Property:
        return Property(
            id=row.id,
            title=row.title,
            type=row.type,
            description=row.description,
            price=row.price,
            location=Location(address=row.address, city=row.city, state=row.state),
            square_feet=row.square_feet,
            year_built=row.year_built,
            bedrooms=row.bedrooms,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
