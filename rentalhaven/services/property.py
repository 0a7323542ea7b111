"""Property service for business logic."""

import logging
import random

from sqlalchemy.orm import Session

from rentalhaven.core.exceptions import BadRequest, NotFound
from rentalhaven.models.enums import NIGHTS_PER_MONTH
from rentalhaven.models.property import Property
from rentalhaven.models.user import User
from rentalhaven.repositories.property import PropertyRepository
from rentalhaven.repositories.user import UserRepository
from rentalhaven.schemas.property import PropertyCreate

logger = logging.getLogger(__name__)

RATING_MIN = 4.2
RATING_SPAN = 0.7
REVIEW_COUNT_MIN = 5
REVIEW_COUNT_SPAN = 20


def monthly_price(price_per_night: float) -> float:
    """Implied monthly rate for a nightly price."""
    return price_per_night * NIGHTS_PER_MONTH


def random_rating(rng: random.Random) -> float:
    """Uniform rating in [4.2, 4.9)."""
    return RATING_MIN + rng.random() * RATING_SPAN


def random_review_count(rng: random.Random) -> int:
    """Uniform integer review count in [5, 25)."""
    return REVIEW_COUNT_MIN + int(rng.random() * REVIEW_COUNT_SPAN)


def build_property(
    property_data: PropertyCreate,
    owner: User,
    rng: random.Random,
) -> Property:
    """Construct an unsaved property with its derived fields filled in."""
    return Property(
        title=property_data.title,
        description=property_data.description,
        price_per_night=property_data.price_per_night,
        price=monthly_price(property_data.price_per_night),
        city=property_data.city,
        state=property_data.state,
        type=property_data.type,
        images=property_data.images,
        rating=random_rating(rng),
        review_count=random_review_count(rng),
        owner=owner,
    )


def create_property(
    db: Session,
    property_data: PropertyCreate,
    owner_id: int,
    rng: random.Random | None = None,
) -> Property:
    """Create a listing for an existing owner."""
    owner = UserRepository(db).find_by_id(owner_id)
    if not owner:
        raise BadRequest("Owner not found")

    property_obj = build_property(property_data, owner, rng or random.Random())
    property_obj = PropertyRepository(db).create(property_obj)
    logger.info("Created property %s for owner %s", property_obj.id, owner.id)
    return property_obj


def get_property(db: Session, property_id: int) -> Property:
    """Get a property by ID."""
    property_obj = PropertyRepository(db).find_by_id(property_id)
    if not property_obj:
        raise NotFound("Property not found")
    return property_obj


def get_properties(db: Session) -> list[Property]:
    """Get all properties."""
    return PropertyRepository(db).find_all()
