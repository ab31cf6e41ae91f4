"""
Pydantic schemas for hotel responses.

Attributes are read from the ORM objects by their Python names and written
out with the camelCase wire names clients expect (createdAt, hotelId, Rooms).
"""

from datetime import datetime
from pydantic import BaseModel, Field


class HotelResponse(BaseModel):
    id: int
    name: str
    image: str
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    model_config = {"from_attributes": True}


class RoomResponse(BaseModel):
    id: int
    name: str
    capacity: int
    hotel_id: int = Field(serialization_alias="hotelId")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    model_config = {"from_attributes": True}


class HotelWithRoomsResponse(HotelResponse):
    rooms: list[RoomResponse] = Field(serialization_alias="Rooms")
