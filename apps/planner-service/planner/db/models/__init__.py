"""
Domain-split SQLAlchemy models with a single aggregator.

Exposes `Base`, `now_utc`, and all ORM classes so callers can use
`from planner.db import models` and `models.Trip`.
"""

from .base import Base, now_utc  # re-export

from .trips import Trip, Participant, Activity, Link
from .notifications import EmailNotificationLog

__all__ = [
    # base
    "Base",
    "now_utc",
    # trips
    "Trip",
    "Participant",
    "Activity",
    "Link",
    # notifications
    "EmailNotificationLog",
]
