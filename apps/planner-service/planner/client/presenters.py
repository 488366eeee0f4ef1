"""
Display helpers for trip screens.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import List, Optional, Sequence

from planner.client.api import DayActivities, TripDetails
from planner.utils.dates import as_utc

MAX_DESTINATION_LENGTH = 14


def trip_summary(trip: TripDetails) -> str:
    """'Florianópolis,... from 05 to 12 of Aug.' for 'Florianópolis, SC'."""
    destination = trip.destination
    if len(destination) > MAX_DESTINATION_LENGTH:
        destination = destination[:MAX_DESTINATION_LENGTH] + "..."
    return (
        f"{destination} from {trip.starts_at:%d} to {trip.ends_at:%d} "
        f"of {trip.starts_at:%b}."
    )


@dataclass
class ActivityItem:
    id: str
    title: str
    hour: str
    is_before: bool


@dataclass
class ActivitySection:
    day_number: int
    day_name: str
    date: date
    activities: List[ActivityItem] = field(default_factory=list)


def activity_sections(days: Sequence[DayActivities], now: Optional[datetime] = None) -> List[ActivitySection]:
    """One section per trip day; past activities are flagged `is_before`."""
    now = as_utc(now or datetime.now(UTC))
    return [
        ActivitySection(
            day_number=day.date.day,
            day_name=day.date.strftime("%A"),
            date=day.date,
            activities=[
                ActivityItem(
                    id=activity.id,
                    title=activity.title,
                    hour=f"{activity.occurs_at:%H:%M}h",
                    is_before=as_utc(activity.occurs_at) < now,
                )
                for activity in day.activities
            ],
        )
        for day in days
    ]
