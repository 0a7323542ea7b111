"""Property database model."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentalhaven.core.database import Base
from rentalhaven.models.enums import DEFAULT_RATING

if TYPE_CHECKING:
    from rentalhaven.models.user import User


class Property(Base):
    """Rental listing owned by exactly one user."""

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text)
    # Implied monthly rate, derived once from price_per_night and never recomputed
    price: Mapped[float] = mapped_column(Float)
    price_per_night: Mapped[float] = mapped_column(Float)
    city: Mapped[str] = mapped_column(String(100), index=True)
    state: Mapped[str] = mapped_column(String(100))
    type: Mapped[str] = mapped_column(String(50))
    # Opaque text, may hold comma-joined URLs
    images: Mapped[str | None] = mapped_column(Text, nullable=True)
    rating: Mapped[float] = mapped_column(Float, default=DEFAULT_RATING)
    review_count: Mapped[int] = mapped_column(default=0)
    owner_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    # Relationships
    owner: Mapped["User"] = relationship(back_populates="properties", lazy="joined")
