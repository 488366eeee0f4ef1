import uuid
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ParticipantInvite(BaseModel):
    email: EmailStr


class ParticipantConfirm(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr


class Participant(BaseModel):
    id: uuid.UUID
    name: Optional[str] = None
    email: str
    is_confirmed: bool
    model_config = ConfigDict(from_attributes=True)


class ParticipantResponse(BaseModel):
    participant: Participant


class ParticipantList(BaseModel):
    participants: List[Participant]


class ParticipantCreated(BaseModel):
    participant_id: uuid.UUID = Field(alias="participantId")
    model_config = ConfigDict(populate_by_name=True)
