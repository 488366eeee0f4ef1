import uuid
from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator

from planner.utils.validation import is_valid_url


class LinkCreate(BaseModel):
    title: str = Field(min_length=4, max_length=255)
    url: str

    @field_validator("url")
    @classmethod
    def _url_must_be_valid(cls, v: str) -> str:
        v = v.strip()
        if not is_valid_url(v):
            raise ValueError("Invalid URL")
        return v


class Link(BaseModel):
    id: uuid.UUID
    title: str
    url: str
    model_config = ConfigDict(from_attributes=True)


class LinkList(BaseModel):
    links: List[Link]


class LinkCreated(BaseModel):
    link_id: uuid.UUID = Field(alias="linkId")
    model_config = ConfigDict(populate_by_name=True)
