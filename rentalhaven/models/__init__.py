"""Database models."""

from rentalhaven.models.enums import PropertyType
from rentalhaven.models.property import Property
from rentalhaven.models.user import User

__all__ = ["Property", "PropertyType", "User"]
