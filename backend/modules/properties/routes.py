"""
Property listing API endpoints.

Reads are public. Create, update and delete require a bearer token; the
auth gate dependency resolves before the body or the identifier are
looked at, so an unauthenticated call never reaches listing logic.

Mutating handlers read the raw request and parse the listing body
themselves. A declared body parameter would be decoded by FastAPI ahead
of the gate, turning a malformed unauthenticated request into a 400.
"""

import json
from typing import TypeVar

import pydantic
from fastapi import APIRouter, Depends, Request, Response

from api.middleware.auth import get_current_user
from api.dependencies import get_property_service
from shared.models import AuthenticatedUser

from .exceptions import InvalidPropertyBodyError
from .interfaces import IPropertyService
from .models import Property, PropertyCreate, PropertyUpdate

router = APIRouter()

BodyModel = TypeVar("BodyModel", bound=pydantic.BaseModel)


async def parse_listing_body(request: Request, model: type[BodyModel]) -> BodyModel:
    """
    Decode the request body as JSON and validate it against ``model``.

    Raises:
        InvalidPropertyBodyError: Body is not JSON or does not fit the model
    """
    try:
        data = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidPropertyBodyError("Invalid JSON body") from e

    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if isinstance(part, str))
        message = first.get("msg", "Invalid value")
        raise InvalidPropertyBodyError(f"{field}: {message}" if field else message) from e


@router.get("", response_model=list[Property])
async def list_properties(
    service: IPropertyService = Depends(get_property_service),
) -> list[Property]:
    """List all properties, newest first."""
    return await service.list_properties()


@router.post("", response_model=Property, status_code=201)
async def create_property(
    request: Request,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPropertyService = Depends(get_property_service),
) -> Property:
    """Create a new property listing."""
    listing = await parse_listing_body(request, PropertyCreate)
    return await service.create_property(listing)


@router.get("/{property_id}", response_model=Property)
async def get_property(
    property_id: str,
    service: IPropertyService = Depends(get_property_service),
) -> Property:
    """Get a property by ID."""
    return await service.get_property(property_id)


@router.put("/{property_id}", response_model=Property)
async def update_property(
    property_id: str,
    request: Request,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPropertyService = Depends(get_property_service),
) -> Property:
    """Update a property. Only the fields sent are changed."""
    changes = await parse_listing_body(request, PropertyUpdate)
    return await service.update_property(property_id, changes)


@router.delete("/{property_id}", status_code=204)
async def delete_property(
    property_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPropertyService = Depends(get_property_service),
) -> Response:
    """Delete a property."""
    await service.delete_property(property_id)
    return Response(status_code=204)
