"""
Property listings module.

Listing CRUD. Reads are public; create, update and delete sit behind
the auth gate at the route layer.
"""

from .interfaces import IPropertyService
from .models import Location, Property, PropertyCreate, PropertyUpdate
from .exceptions import InvalidPropertyBodyError, InvalidPropertyIdError, PropertyNotFoundError

__all__ = [
    "IPropertyService",
    "Location",
    "Property",
    "PropertyCreate",
    "PropertyUpdate",
    "InvalidPropertyBodyError",
    "InvalidPropertyIdError",
    "PropertyNotFoundError",
]
