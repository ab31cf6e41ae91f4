from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hotel_api.core.metrics import record_db_operation
from hotel_api.models import Hotel


async def find_all_hotels(db: AsyncSession) -> list[Hotel]:
    record_db_operation("find_hotels")
    result = await db.execute(select(Hotel).order_by(Hotel.id.asc()))
    return list(result.scalars().all())


async def find_hotel_by_id(db: AsyncSession, hotel_id: int) -> Optional[Hotel]:
    """Hotel row only; `rooms` is not loaded and must not be touched."""
    record_db_operation("find_hotel")
    result = await db.execute(select(Hotel).where(Hotel.id == hotel_id))
    return result.scalar_one_or_none()


async def find_hotel_with_rooms(db: AsyncSession, hotel_id: int) -> Optional[Hotel]:
    record_db_operation("find_hotel_with_rooms")
    result = await db.execute(
        select(Hotel)
        .options(selectinload(Hotel.rooms))
        .where(Hotel.id == hotel_id)
    )
    return result.scalar_one_or_none()
