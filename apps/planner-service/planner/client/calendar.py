"""
Calendar range selection.

Tapping days on the trip calendar builds a range one day at a time: the
first tap sets the start, the second the end (swapping if needed), and a
third tap starts over.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Optional

from planner.utils.dates import iter_days


@dataclass(frozen=True)
class MarkedDate:
    selected: bool = True
    starting_day: bool = False
    ending_day: bool = False


@dataclass
class DatesSelected:
    starts_at: Optional[date] = None
    ends_at: Optional[date] = None
    formatted_dates_in_text: str = ""
    dates: Dict[date, MarkedDate] = field(default_factory=dict)

    @property
    def is_complete(self) -> bool:
        return self.starts_at is not None and self.ends_at is not None


def format_dates_in_text(starts_at: date, ends_at: date) -> str:
    """'5 to 12 of August', or '28 of July to 2 of August' across months."""
    if (starts_at.year, starts_at.month) == (ends_at.year, ends_at.month):
        return f"{starts_at.day} to {ends_at.day} of {ends_at.strftime('%B')}"
    return f"{starts_at.day} of {starts_at.strftime('%B')} to {ends_at.day} of {ends_at.strftime('%B')}"


def get_interval_dates(starts_at: date, ends_at: date) -> Dict[date, MarkedDate]:
    return {
        day: MarkedDate(starting_day=day == starts_at, ending_day=day == ends_at)
        for day in iter_days(starts_at, ends_at)
    }


def order_starts_at_and_ends_at(
    starts_at: Optional[date],
    ends_at: Optional[date],
    selected_day: date,
) -> DatesSelected:
    if starts_at is None or ends_at is not None:
        return DatesSelected(
            starts_at=selected_day,
            dates={selected_day: MarkedDate(starting_day=True)},
        )

    if selected_day <= starts_at:
        new_start, new_end = selected_day, starts_at
    else:
        new_start, new_end = starts_at, selected_day

    return DatesSelected(
        starts_at=new_start,
        ends_at=new_end,
        formatted_dates_in_text=format_dates_in_text(new_start, new_end),
        dates=get_interval_dates(new_start, new_end),
    )
