"""
Activity repository functions.
"""
from __future__ import annotations

import uuid
from typing import List
from sqlalchemy.orm import Session

from planner.db import models, schemas
from planner.utils.dates import as_utc


def create_activity(db: Session, trip_id: uuid.UUID, activity: schemas.ActivityCreate) -> models.Activity:
    db_activity = models.Activity(
        trip_id=trip_id,
        title=activity.title,
        occurs_at=as_utc(activity.occurs_at),
    )
    try:
        db.add(db_activity)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_activity)
    return db_activity


def get_trip_activities(db: Session, trip_id: uuid.UUID) -> List[models.Activity]:
    return (
        db.query(models.Activity)
        .filter(models.Activity.trip_id == trip_id)
        .order_by(models.Activity.occurs_at.asc())
        .all()
    )
