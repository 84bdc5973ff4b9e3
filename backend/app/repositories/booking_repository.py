"""
SQLAlchemy implementation of the booking store.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.booking import Booking
from app.repositories.interfaces import BookingRepository


class SqlBookingRepository(BookingRepository):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, booking_id: int) -> Optional[Booking]:
        result = await self.db.execute(select(Booking).where(Booking.id == booking_id))
        return result.scalar_one_or_none()

    async def find_by_user_id(self, user_id: int) -> Optional[Booking]:
        result = await self.db.execute(
            select(Booking)
            .where(Booking.user_id == user_id)
            .order_by(Booking.id.asc())
            .limit(1)
            .options(selectinload(Booking.room))
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    async def create(self, user_id: int, room_id: int) -> Booking:
        booking = Booking(user_id=user_id, room_id=room_id)
        self.db.add(booking)
        await self.db.flush()
        await self.db.refresh(booking)
        return booking

    async def update_room(self, booking: Booking, room_id: int) -> Booking:
        booking.room_id = room_id
        await self.db.flush()
        await self.db.refresh(booking)
        return booking

    async def commit(self) -> None:
        await self.db.commit()
