"""
Property listing data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Location(_CamelModel):
    """Where the property is."""

    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)


class PropertyCreate(_CamelModel):
    """Request to create a listing. All fields are required."""

    title: str = Field(..., min_length=1, description="Short, descriptive name")
    type: str = Field(..., min_length=1, description="Apartment, House, Commercial, ...")
    description: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    location: Location
    square_feet: float = Field(..., gt=0)
    year_built: int
    bedrooms: int = Field(..., ge=0)


class PropertyUpdate(_CamelModel):
    """Partial update of a listing. Omitted fields are left unchanged."""

    title: Optional[str] = Field(None, min_length=1)
    type: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    location: Optional[Location] = None
    square_feet: Optional[float] = Field(None, gt=0)
    year_built: Optional[int] = None
    bedrooms: Optional[int] = Field(None, ge=0)


class Property(PropertyCreate):
    """A stored listing."""

    id: str
    created_at: datetime
    updated_at: datetime
