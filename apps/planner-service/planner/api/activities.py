"""
Activities API endpoints.

Activities must fall on one of the trip's days; listing groups them per day
across the whole trip, including days with nothing planned.
"""
import logging
from collections import defaultdict
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from planner.api.deps import get_trip_or_404
from planner.db import models, schemas
from planner.db.database import get_db
from planner.db.repositories import activities as activity_repo
from planner.errors import ClientError
from planner.utils.dates import day_of, iter_days

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips/{trip_id}/activities", tags=["activities"])


@router.post("", response_model=schemas.ActivityCreated, status_code=status.HTTP_201_CREATED)
def create_activity_endpoint(
    activity: schemas.ActivityCreate,
    db_trip: models.Trip = Depends(get_trip_or_404),
    db: Session = Depends(get_db),
):
    occurs_on = day_of(activity.occurs_at)
    if not day_of(db_trip.starts_at) <= occurs_on <= day_of(db_trip.ends_at):
        logger.warning("Rejected activity date %s for trip %s", activity.occurs_at, db_trip.id)
        raise ClientError("Invalid activity date.")
    db_activity = activity_repo.create_activity(db, db_trip.id, activity)
    return schemas.ActivityCreated(activity_id=db_activity.id)


@router.get("", response_model=schemas.ActivityList)
def get_activities_endpoint(
    db_trip: models.Trip = Depends(get_trip_or_404),
    db: Session = Depends(get_db),
):
    by_day = defaultdict(list)
    for db_activity in activity_repo.get_trip_activities(db, db_trip.id):
        by_day[day_of(db_activity.occurs_at)].append(db_activity)

    days = [
        {"date": day, "activities": by_day.get(day, [])}
        for day in iter_days(day_of(db_trip.starts_at), day_of(db_trip.ends_at))
    ]
    return {"activities": days}
