"""Booking API routes (stubs, nothing is persisted)."""

from typing import Any

from fastapi import APIRouter, Body

from rentalhaven.schemas.booking import BookingAck, BookingList
from rentalhaven.services import booking as booking_service

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", response_model=BookingAck)
def create_booking(booking_data: dict[str, Any] = Body(...)) -> BookingAck:
    return booking_service.create_booking(booking_data)


@router.get("/user", response_model=BookingList)
def user_bookings(email: str | None = None) -> BookingList:
    return booking_service.get_user_bookings(email)


@router.get("/owner", response_model=BookingList)
def owner_bookings(email: str | None = None) -> BookingList:
    return booking_service.get_owner_bookings(email)


@router.put("/{booking_id}", response_model=BookingAck, response_model_exclude_none=True)
def update_booking(booking_id: str, booking_data: dict[str, Any] = Body(...)) -> BookingAck:
    return booking_service.update_booking(booking_id, booking_data)
