"""Property API routes."""

import random

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from rentalhaven.api.dependencies import get_rng
from rentalhaven.core.database import get_db
from rentalhaven.schemas.property import PropertyCreate, PropertyResponse
from rentalhaven.services import property as property_service

router = APIRouter(prefix="/properties", tags=["properties"])


@router.get("", response_model=list[PropertyResponse])
def list_properties(db: Session = Depends(get_db)) -> list[PropertyResponse]:
    """List all properties."""
    properties = property_service.get_properties(db)
    return [PropertyResponse.model_validate(p) for p in properties]


@router.get("/{property_id}", response_model=PropertyResponse)
def get_property(
    property_id: int,
    db: Session = Depends(get_db),
) -> PropertyResponse:
    """Get a property by ID."""
    property_obj = property_service.get_property(db, property_id)
    return PropertyResponse.model_validate(property_obj)


@router.post("", response_model=PropertyResponse)
def create_property(
    property_data: PropertyCreate,
    owner_id: int = Query(alias="ownerId"),
    db: Session = Depends(get_db),
    rng: random.Random = Depends(get_rng),
) -> PropertyResponse:
    """Create a listing owned by ``ownerId``."""
    property_obj = property_service.create_property(db, property_data, owner_id, rng)
    return PropertyResponse.model_validate(property_obj)
