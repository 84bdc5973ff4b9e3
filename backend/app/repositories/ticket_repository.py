from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.ticket import Ticket
from app.repositories.interfaces import TicketRepository


class SqlTicketRepository(TicketRepository):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        result = await self.db.execute(
            select(Ticket)
            .where(Ticket.enrollment_id == enrollment_id)
            .order_by(Ticket.id.asc())
            .limit(1)
            .options(selectinload(Ticket.ticket_type))
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()
