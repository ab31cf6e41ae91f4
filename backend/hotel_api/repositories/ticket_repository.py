from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from hotel_api.core.metrics import record_db_operation
from hotel_api.models import Ticket


async def find_ticket_by_enrollment_id(db: AsyncSession, enrollment_id: int) -> Optional[Ticket]:
    """Ticket for an enrollment, with its TicketType already loaded."""
    record_db_operation("find_ticket")
    result = await db.execute(
        select(Ticket)
        .options(joinedload(Ticket.ticket_type))
        .where(Ticket.enrollment_id == enrollment_id)
    )
    return result.scalar_one_or_none()
