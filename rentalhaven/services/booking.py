"""Booking endpoints backend.

Booking logic does not exist yet. Every function returns a canned
acknowledgement and persists nothing.
"""

import logging
import time
from typing import Any

from rentalhaven.schemas.booking import BookingAck, BookingList

logger = logging.getLogger(__name__)

PENDING = "pending"


def create_booking(booking_data: dict[str, Any]) -> BookingAck:
    """Acknowledge a booking request without storing it."""
    logger.warning("Booking creation is not implemented; request discarded")
    return BookingAck(
        message="Booking created successfully",
        booking_id=f"temp-{int(time.time() * 1000)}",
        status=PENDING,
    )


def get_user_bookings(email: str | None = None) -> BookingList:
    logger.warning("User booking lookup is not implemented; returning no bookings")
    return BookingList(message="User bookings retrieved", bookings=[])


def get_owner_bookings(email: str | None = None) -> BookingList:
    logger.warning("Owner booking lookup is not implemented; returning no bookings")
    return BookingList(message="Owner bookings retrieved", bookings=[])


def update_booking(booking_id: str, booking_data: dict[str, Any]) -> BookingAck:
    """Acknowledge an update for ``booking_id`` without storing it."""
    logger.warning("Booking update is not implemented; request for %s discarded", booking_id)
    return BookingAck(message="Booking updated successfully", booking_id=booking_id)
