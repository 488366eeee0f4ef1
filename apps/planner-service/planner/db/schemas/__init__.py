"""
Domain-split Pydantic schemas with a single aggregator.

Callers use `from planner.db import schemas` and `schemas.TripCreate`.
"""

from .trips import TripBase, TripCreate, TripUpdate, Trip, TripResponse, TripCreated
from .participants import (
    ParticipantInvite,
    ParticipantConfirm,
    Participant,
    ParticipantResponse,
    ParticipantList,
    ParticipantCreated,
)
from .activities import ActivityCreate, Activity, DayActivities, ActivityList, ActivityCreated
from .links import LinkCreate, Link, LinkList, LinkCreated

__all__ = [
    # Trips
    "TripBase",
    "TripCreate",
    "TripUpdate",
    "Trip",
    "TripResponse",
    "TripCreated",
    # Participants
    "ParticipantInvite",
    "ParticipantConfirm",
    "Participant",
    "ParticipantResponse",
    "ParticipantList",
    "ParticipantCreated",
    # Activities
    "ActivityCreate",
    "Activity",
    "DayActivities",
    "ActivityList",
    "ActivityCreated",
    # Links
    "LinkCreate",
    "Link",
    "LinkList",
    "LinkCreated",
]
