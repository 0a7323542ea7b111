"""Repository layer over the SQLAlchemy session."""

from rentalhaven.repositories.property import PropertyRepository
from rentalhaven.repositories.user import UserRepository

__all__ = ["PropertyRepository", "UserRepository"]
