"""Property store."""

from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from rentalhaven.models.property import Property


class PropertyRepository:
    """Persistence operations for properties.

    Owners are loaded eagerly together with each property, so returned
    objects stay usable after the session is closed.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, property_obj: Property) -> Property:
        """Persist a new property and return it with its id assigned."""
        self.db.add(property_obj)
        self.db.commit()
        self.db.refresh(property_obj)
        return property_obj

    def create_all(self, properties: Iterable[Property]) -> list[Property]:
        """Persist a batch of properties in a single commit."""
        batch = list(properties)
        self.db.add_all(batch)
        self.db.commit()
        for property_obj in batch:
            self.db.refresh(property_obj)
        return batch

    def save(self, property_obj: Property) -> Property:
        """Overwrite an existing property with the object's current state."""
        merged = self.db.merge(property_obj)
        self.db.commit()
        self.db.refresh(merged)
        return merged

    def find_by_id(self, property_id: int) -> Property | None:
        return self.db.get(Property, property_id)

    def find_all(self) -> list[Property]:
        """Return every property in insertion order."""
        return list(self.db.scalars(select(Property).order_by(Property.id)).all())

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(Property)) or 0
