"""Sample data seeding.

Every call appends a full copy of the catalog; nothing checks for an earlier
run. The "does any user exist" check and the demo owner insert are not atomic,
so two concurrent calls on an empty database can create two demo owners.
"""

import logging
import random
from typing import NamedTuple

from sqlalchemy.orm import Session

from rentalhaven.models.property import Property
from rentalhaven.models.user import User
from rentalhaven.repositories.property import PropertyRepository
from rentalhaven.repositories.user import UserRepository
from rentalhaven.schemas.property import PropertyCreate
from rentalhaven.services.property import build_property

logger = logging.getLogger(__name__)

SEED_MESSAGE = "Sample properties added."

DEMO_OWNER_EMAIL = "demo-owner@rentalhaven.com"
DEMO_OWNER_NAME = "Demo Owner"
# Stored as plaintext, unlike registered users, so this account cannot log in.
DEMO_OWNER_PASSWORD = "demo1234"

DEFAULT_IMAGE_URL = (
    "https://images.unsplash.com/photo-1522708323590-d24dbb6b0267?auto=format&fit=crop&w=800&q=80"
)

_UNSPLASH = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=800&q=80"

# Keyed by f"{city}-{type}", exact match
IMAGE_URLS: dict[str, str] = {
    "Mumbai-apartment": _UNSPLASH.format("1506744038136-46273834b3fb"),
    "Bangalore-apartment": _UNSPLASH.format("1464983953574-0892a716854b"),
    "Delhi-house": _UNSPLASH.format("1512918728675-ed5a9ecdebfd"),
    "Pune-studio": _UNSPLASH.format("1519125323398-675f0ddb6308"),
    "Hyderabad-apartment": _UNSPLASH.format("1507089947368-19c1da9775ae"),
    "Chennai-studio": _UNSPLASH.format("1465101046530-73398c7f28ca"),
    "Goa-villa": _UNSPLASH.format("1507089947368-19c1da9775ae"),
    "Ahmedabad-apartment": _UNSPLASH.format("1465101178521-c1a9136a3b99"),
    "Jaipur-apartment": _UNSPLASH.format("1465101046530-73398c7f28ca"),
    "Chandigarh-apartment": _UNSPLASH.format("1519125323398-675f0ddb6308"),
    "Lucknow-studio": _UNSPLASH.format("1464983953574-0892a716854b"),
    "Indore-apartment": _UNSPLASH.format("1512918728675-ed5a9ecdebfd"),
    "Bhopal-apartment": _UNSPLASH.format("1506744038136-46273834b3fb"),
    "Surat-apartment": _UNSPLASH.format("1465101178521-c1a9136a3b99"),
    "Kochi-house": _UNSPLASH.format("1465101046530-73398c7f28ca"),
    "Patna-apartment": _UNSPLASH.format("1519125323398-675f0ddb6308"),
    "Kanpur-apartment": _UNSPLASH.format("1464983953574-0892a716854b"),
    "Nagpur-apartment": _UNSPLASH.format("1506744038136-46273834b3fb"),
    "Thiruvananthapuram-apartment": _UNSPLASH.format("1465101178521-c1a9136a3b99"),
    "Mysore-apartment": _UNSPLASH.format("1512918728675-ed5a9ecdebfd"),
}


class CatalogEntry(NamedTuple):
    title: str
    description: str
    price_per_night: float
    city: str
    state: str
    type: str


CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry("2BHK Apartment in Mumbai", "Spacious 2BHK in Andheri, Mumbai. Close to metro and malls.", 40000.0, "Mumbai", "Maharashtra", "apartment"),
    CatalogEntry("1BHK Flat in Bangalore", "Modern 1BHK in Whitefield, Bangalore. Near IT parks.", 25000.0, "Bangalore", "Karnataka", "apartment"),
    CatalogEntry("3BHK House in Delhi", "Large 3BHK in South Delhi. Gated community, park facing.", 55000.0, "Delhi", "Delhi", "house"),
    CatalogEntry("Studio in Pune", "Affordable studio in Koregaon Park, Pune. Ideal for singles.", 18000.0, "Pune", "Maharashtra", "studio"),
    CatalogEntry("2BHK in Hyderabad", "2BHK in Hitech City, Hyderabad. Fully furnished.", 30000.0, "Hyderabad", "Telangana", "apartment"),
    CatalogEntry("1RK in Chennai", "Compact 1RK in T Nagar, Chennai. Close to shopping.", 12000.0, "Chennai", "Tamil Nadu", "studio"),
    CatalogEntry("3BHK Villa in Goa", "Luxury 3BHK villa with pool in North Goa.", 90000.0, "Goa", "Goa", "villa"),
    CatalogEntry("2BHK in Ahmedabad", "2BHK in Satellite, Ahmedabad. Near schools.", 22000.0, "Ahmedabad", "Gujarat", "apartment"),
    CatalogEntry("1BHK in Jaipur", "1BHK in Malviya Nagar, Jaipur. Peaceful locality.", 15000.0, "Jaipur", "Rajasthan", "apartment"),
    CatalogEntry("2BHK in Chandigarh", "Modern 2BHK in Sector 22, Chandigarh.", 28000.0, "Chandigarh", "Chandigarh", "apartment"),
    CatalogEntry("Studio in Lucknow", "Studio apartment in Gomti Nagar, Lucknow.", 10000.0, "Lucknow", "Uttar Pradesh", "studio"),
    CatalogEntry("2BHK in Indore", "2BHK in Vijay Nagar, Indore. Family friendly.", 17000.0, "Indore", "Madhya Pradesh", "apartment"),
    CatalogEntry("1BHK in Bhopal", "1BHK in Arera Colony, Bhopal. Green surroundings.", 11000.0, "Bhopal", "Madhya Pradesh", "apartment"),
    CatalogEntry("2BHK in Surat", "2BHK in Adajan, Surat. Near riverfront.", 20000.0, "Surat", "Gujarat", "apartment"),
    CatalogEntry("3BHK in Kochi", "3BHK in Kakkanad, Kochi. Spacious and airy.", 35000.0, "Kochi", "Kerala", "house"),
    CatalogEntry("1BHK in Patna", "1BHK in Boring Road, Patna. Affordable rent.", 9000.0, "Patna", "Bihar", "apartment"),
    CatalogEntry("2BHK in Kanpur", "2BHK in Swaroop Nagar, Kanpur. Well connected.", 16000.0, "Kanpur", "Uttar Pradesh", "apartment"),
    CatalogEntry("2BHK in Nagpur", "2BHK in Dharampeth, Nagpur. Near market.", 18000.0, "Nagpur", "Maharashtra", "apartment"),
    CatalogEntry("1BHK in Thiruvananthapuram", "1BHK in Kowdiar, Thiruvananthapuram. Quiet area.", 13000.0, "Thiruvananthapuram", "Kerala", "apartment"),
    CatalogEntry("2BHK in Mysore", "2BHK in VV Mohalla, Mysore. Close to parks.", 14000.0, "Mysore", "Karnataka", "apartment"),
)  # fmt: skip


def image_for(city: str, property_type: str) -> str:
    """Look up the sample image for a city/type pair."""
    return IMAGE_URLS.get(f"{city}-{property_type}", DEFAULT_IMAGE_URL)


def annotate_description(description: str, price_per_night: float) -> str:
    """Append the fixed rupee price note to a catalog description."""
    return f"{description} Price: ₹{float(price_per_night)} per month (INR)"


def get_or_create_owner(db: Session) -> User:
    """Return the first user, creating the demo owner when there is none."""
    users = UserRepository(db)
    owner = users.find_first()
    if owner:
        return owner

    owner = users.create(
        User(
            email=DEMO_OWNER_EMAIL,
            name=DEMO_OWNER_NAME,
            password=DEMO_OWNER_PASSWORD,
        )
    )
    logger.info("Created demo owner %s", owner.id)
    return owner


def catalog_property(entry: CatalogEntry, owner: User, rng: random.Random) -> Property:
    """Build an unsaved property from one catalog entry."""
    property_data = PropertyCreate(
        title=entry.title,
        description=annotate_description(entry.description, entry.price_per_night),
        price_per_night=entry.price_per_night,
        city=entry.city,
        state=entry.state,
        type=entry.type,
        images=image_for(entry.city, entry.type),
    )
    return build_property(property_data, owner, rng)


def seed_properties(db: Session, rng: random.Random | None = None) -> str:
    """Append the sample catalog to the database and return a confirmation."""
    rng = rng or random.Random()
    owner = get_or_create_owner(db)
    properties = [catalog_property(entry, owner, rng) for entry in CATALOG]
    PropertyRepository(db).create_all(properties)
    logger.info("Seeded %d properties for owner %s", len(properties), owner.id)
    return SEED_MESSAGE
