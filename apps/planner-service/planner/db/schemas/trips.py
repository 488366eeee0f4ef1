import uuid
from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class TripBase(BaseModel):
    destination: str = Field(min_length=4, max_length=255)
    starts_at: datetime
    ends_at: datetime


class TripCreate(TripBase):
    emails_to_invite: List[EmailStr] = Field(default_factory=list)
    owner_name: str = Field(min_length=1, max_length=255)
    owner_email: EmailStr


class TripUpdate(TripBase):
    pass


class Trip(TripBase):
    id: uuid.UUID
    is_confirmed: bool
    model_config = ConfigDict(from_attributes=True)


class TripResponse(BaseModel):
    trip: Trip


class TripCreated(BaseModel):
    trip_id: uuid.UUID = Field(alias="tripId")
    model_config = ConfigDict(populate_by_name=True)
