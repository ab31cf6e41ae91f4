"""
Hotel read operations. Callers must pass the eligibility gate first.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.core.errors import NotFoundError
from hotel_api.core.logging import get_logger
from hotel_api.core.metrics import record_hotel_query
from hotel_api.models import Hotel
from hotel_api.repositories import hotel_repository

logger = get_logger(__name__)

# hotels.id is a 32-bit signed INTEGER column
MAX_HOTEL_ID = 2**31 - 1


def parse_hotel_id(raw: str) -> Optional[int]:
    """Positive integer id from a path segment, or None if it can't be one."""
    raw = raw.strip()
    # ASCII digits only; str.isdecimal() also accepts other scripts' digits
    if not (raw.isascii() and raw.isdigit()):
        return None
    hotel_id = int(raw)
    return hotel_id if 0 < hotel_id <= MAX_HOTEL_ID else None


async def list_hotels(db: AsyncSession) -> list[Hotel]:
    """All hotels in storage order. An empty table is a 404, not an empty list."""
    hotels = await hotel_repository.find_all_hotels(db)
    if not hotels:
        logger.info("hotels_not_found")
        record_hotel_query("list", found=False)
        raise NotFoundError()

    logger.info("hotels_listed", count=len(hotels))
    record_hotel_query("list", found=True)
    return hotels


async def get_hotel(db: AsyncSession, hotel_id: Optional[int]) -> Hotel:
    """A single hotel with its rooms loaded (possibly none)."""
    hotel = None
    if hotel_id is not None:
        hotel = await hotel_repository.find_hotel_with_rooms(db, hotel_id)

    if hotel is None:
        logger.info("hotel_not_found", hotel_id=hotel_id)
        record_hotel_query("detail", found=False)
        raise NotFoundError()

    record_hotel_query("detail", found=True)
    return hotel
