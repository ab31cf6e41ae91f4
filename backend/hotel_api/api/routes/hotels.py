"""
Hotel endpoints. Every route sits behind authentication and the hotel
eligibility gate, which run before the handler sees the path.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.db.session import get_db
from hotel_api.schemas.hotel import HotelResponse, HotelWithRoomsResponse
from hotel_api.services.eligibility_service import check_hotel_eligibility
from hotel_api.services.hotel_service import get_hotel, list_hotels, parse_hotel_id
from hotel_api.core.security import get_current_user_id


async def require_hotel_access(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> None:
    await check_hotel_eligibility(db, user_id)


router = APIRouter(
    prefix="/hotels",
    tags=["Hotels"],
    dependencies=[Depends(require_hotel_access)],
)


@router.get("", response_model=list[HotelResponse])
async def list_hotels_endpoint(db: AsyncSession = Depends(get_db)):
    """List every hotel. 404 when none exist."""
    return await list_hotels(db)


@router.get("/{hotel_id}", response_model=HotelWithRoomsResponse)
async def get_hotel_endpoint(hotel_id: str, db: AsyncSession = Depends(get_db)):
    """
    Get one hotel with its rooms.
    A non-numeric or non-positive id is treated as a hotel that doesn't exist.
    """
    hotel = await get_hotel(db, parse_hotel_id(hotel_id))
    return hotel
