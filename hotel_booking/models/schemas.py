"""
Pydantic schemas
Request/response validation; JSON keys are camelCase.
"""
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ============== Booking Schemas ==============

class BookingRequest(CamelModel):
    room_id: int


class RoomResponse(CamelModel):
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: datetime
    updated_at: datetime


class BookingWithRoomResponse(BaseModel):
    id: int
    room: RoomResponse = Field(..., alias="Room")
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class BookingIdResponse(BaseModel):
    id: int


# ============== Auth Schemas ==============

class SignUpRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=6)


class SignInRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    id: int
    email: str
    model_config = ConfigDict(from_attributes=True)


class SignInResponse(BaseModel):
    user: UserResponse
    token: str
