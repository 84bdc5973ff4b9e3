"""
Pydantic schemas for booking-related request/response validation.

Field names are camelCase on the wire (`roomId`, `userId`, ...).
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Primary keys are PostgreSQL `integer` columns
MAX_ID = 2**31 - 1


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class BookingRequest(CamelModel):
    # Optional on purpose: a missing room is reported as 404 by the service
    room_id: Optional[int] = Field(None, ge=0, le=MAX_ID)


class RoomResponse(CamelModel):
    id: int
    name: str
    capacity: int
    hotel_id: int


class BookingResponse(CamelModel):
    id: int
    user_id: int
    room_id: int
    created_at: datetime
    updated_at: datetime


class BookingWithRoomResponse(BookingResponse):
    room: RoomResponse
