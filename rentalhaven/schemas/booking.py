"""Booking Pydantic schemas.

Bookings are not persisted; these only describe the canned acknowledgements.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BookingAck(BaseModel):
    """Acknowledgement for create/update."""

    message: str
    booking_id: str
    status: str | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookingList(BaseModel):
    """Listing response. Always empty."""

    message: str
    bookings: list[dict[str, Any]] = []
