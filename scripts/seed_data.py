"""Seed script to populate the database with the sample catalog."""

import random
import sys

from rentalhaven.core.config import settings
from rentalhaven.core.database import Base, SessionLocal, engine
from rentalhaven.core.logging import configure_logging
from rentalhaven.models import property, user  # noqa: F401
from rentalhaven.repositories.property import PropertyRepository
from rentalhaven.services.seed import CATALOG, seed_properties


def seed_database(random_seed: int | None = None) -> None:
    """Create tables if needed and append the sample catalog."""
    configure_logging()
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        message = seed_properties(db, random.Random(random_seed))
        total = PropertyRepository(db).count()
    finally:
        db.close()

    print(message)
    print(f"Database now holds {total} properties.")
    if total > len(CATALOG):
        print("Note: seeding appends; run it once per fresh database to avoid duplicates.")


if __name__ == "__main__":
    seed_arg = int(sys.argv[1]) if len(sys.argv) > 1 else settings.SEED_RANDOM_SEED
    seed_database(seed_arg)
