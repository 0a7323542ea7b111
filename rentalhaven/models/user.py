"""User database model."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentalhaven.core.database import Base

if TYPE_CHECKING:
    from rentalhaven.models.property import Property


class User(Base):
    """Account that can log in and own properties."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    # Matched exactly, case-sensitive
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    # bcrypt hash, except for the seeded demo owner (see services.seed)
    password: Mapped[str] = mapped_column(String(255))
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    # Relationships
    properties: Mapped[list["Property"]] = relationship(back_populates="owner")
