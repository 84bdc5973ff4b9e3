"""
SQLAlchemy implementation of room lookups and the optimistic room claim.

CONCURRENCY STRATEGY: Optimistic Locking on the room
====================================================

Problem:
  Two users try to book the last free place in a room simultaneously.
  Both read len(room.bookings) == capacity - 1, both pass validation,
  both insert. Result: an over-booked room.

Solution:
  Every write that adds a booking to a room first claims the room:

    UPDATE rooms SET version = version + 1
    WHERE id = :room_id AND version = :version_seen_during_validation

  The second writer blocks on the row lock held by the first, then matches
  zero rows once the first commits. The service re-validates (now seeing the
  new booking) and either retries the claim or rejects the request.
"""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.hotel import Room
from app.repositories.interfaces import RoomRepository


class SqlRoomRepository(RoomRepository):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, room_id: int) -> Optional[Room]:
        # populate_existing: the capacity check must never see a stale
        # bookings collection from the session's identity map
        result = await self.db.execute(
            select(Room)
            .where(Room.id == room_id)
            .options(selectinload(Room.bookings))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def claim(self, room: Room) -> bool:
        result = await self.db.execute(
            update(Room)
            .where(Room.id == room.id, Room.version == room.version)
            .values(version=Room.version + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
