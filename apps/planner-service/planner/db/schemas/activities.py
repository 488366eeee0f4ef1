import uuid
from datetime import date as date_type, datetime
from typing import List
from pydantic import BaseModel, ConfigDict, Field


class ActivityCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    occurs_at: datetime


class Activity(BaseModel):
    id: uuid.UUID
    title: str
    occurs_at: datetime
    model_config = ConfigDict(from_attributes=True)


class DayActivities(BaseModel):
    """Activities of one calendar day of the trip."""
    date: date_type
    activities: List[Activity]


class ActivityList(BaseModel):
    activities: List[DayActivities]


class ActivityCreated(BaseModel):
    activity_id: uuid.UUID = Field(alias="activityId")
    model_config = ConfigDict(populate_by_name=True)
