from hotel_api.schemas.hotel import HotelResponse, RoomResponse, HotelWithRoomsResponse

__all__ = [
    "HotelResponse", "RoomResponse", "HotelWithRoomsResponse",
]
