"""Date helpers shared by the API and the client.

Stored timestamps are UTC. SQLite hands them back naive, so every comparison
goes through `as_utc` first.
"""
from __future__ import annotations

from datetime import date, datetime, timedelta, UTC
from typing import Iterator


def as_utc(value: datetime) -> datetime:
    """Return `value` as an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def day_of(value: datetime | date) -> date:
    """Calendar day of a timestamp (UTC), or the date itself."""
    if isinstance(value, datetime):
        return as_utc(value).date()
    return value


def today_utc() -> date:
    return datetime.now(UTC).date()


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day from `start` to `end` inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def format_day_of_month(value: datetime | date) -> str:
    """'5 of August'."""
    d = day_of(value)
    return f"{d.day} of {d.strftime('%B')}"
