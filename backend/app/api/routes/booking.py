"""
Booking endpoints: view, create and move the authenticated user's booking.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path

from app.api.dependencies import get_booking_service
from app.core.security import get_current_user_id
from app.schemas.booking import MAX_ID, BookingRequest, BookingResponse, BookingWithRoomResponse
from app.services.booking_service import BookingService

router = APIRouter(prefix="/booking", tags=["Booking"])


@router.get("", response_model=BookingWithRoomResponse)
async def get_booking(
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Get the authenticated user's booking, with its room."""
    return await service.get_booking(user_id)


@router.post("", response_model=BookingResponse)
async def create_booking(
    booking_data: Optional[BookingRequest] = None,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """
    Book a room.

    Requires an enrollment and a paid, in-person ticket. Returns 404 when the
    room or a prerequisite is missing and 403 when the room is full or the
    ticket does not allow lodging.
    """
    room_id = booking_data.room_id if booking_data else None
    return await service.create_booking(user_id, room_id)


@router.put("/{booking_id}", response_model=BookingResponse)
async def update_booking(
    booking_id: int = Path(..., ge=0, le=MAX_ID),
    booking_data: Optional[BookingRequest] = None,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Move one of the user's bookings to another room."""
    room_id = booking_data.room_id if booking_data else None
    return await service.update_booking(user_id, room_id, booking_id)
