from app.schemas.booking import BookingRequest, BookingResponse, BookingWithRoomResponse, RoomResponse

__all__ = [
    "BookingRequest", "BookingResponse", "BookingWithRoomResponse", "RoomResponse",
]
