"""
Trips API endpoints.

Create, read, update and confirm trips. Creating a trip emails the owner a
confirmation link; confirming it emails every invited guest.
"""
import logging
from datetime import datetime
from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from planner.api.deps import get_notification_service, get_trip_or_404
from planner.db import models, schemas
from planner.db.database import get_db
from planner.db.repositories import participants as participant_repo
from planner.db.repositories import trips as trip_repo
from planner.errors import ClientError
from planner.services.notification_service import NotificationService
from planner.utils.dates import day_of, today_utc
from planner.utils.urls import build_web_trip_link

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips", tags=["trips"])


def validate_trip_dates(starts_at: datetime, ends_at: datetime) -> None:
    """Whole days are compared: a trip may start today and end the day it starts."""
    start_day = day_of(starts_at)
    if start_day < today_utc():
        logger.warning("Rejected trip start date %s", starts_at)
        raise ClientError("Invalid trip start date.")
    if day_of(ends_at) < start_day:
        logger.warning("Rejected trip end date %s (starts %s)", ends_at, starts_at)
        raise ClientError("Invalid trip end date.")


@router.post("", response_model=schemas.TripCreated, status_code=status.HTTP_201_CREATED)
def create_trip_endpoint(
    trip: schemas.TripCreate,
    db: Session = Depends(get_db),
    notifications: NotificationService = Depends(get_notification_service),
):
    logger.info(
        "create_trip: destination=%s starts_at=%s ends_at=%s invites=%d",
        trip.destination, trip.starts_at, trip.ends_at, len(trip.emails_to_invite),
    )
    validate_trip_dates(trip.starts_at, trip.ends_at)
    db_trip = trip_repo.create_trip(db, trip)
    owner = next(p for p in db_trip.participants if p.is_owner)
    notifications.notify_trip_created(db_trip, owner)
    return schemas.TripCreated(trip_id=db_trip.id)


@router.get("/{trip_id}", response_model=schemas.TripResponse)
def get_trip_endpoint(db_trip: models.Trip = Depends(get_trip_or_404)):
    return {"trip": db_trip}


@router.put("/{trip_id}", response_model=schemas.TripCreated)
def update_trip_endpoint(
    trip: schemas.TripUpdate,
    db_trip: models.Trip = Depends(get_trip_or_404),
    db: Session = Depends(get_db),
):
    validate_trip_dates(trip.starts_at, trip.ends_at)
    updated = trip_repo.update_trip(db, db_trip.id, trip)
    return schemas.TripCreated(trip_id=updated.id)


@router.get("/{trip_id}/confirm", response_class=RedirectResponse, status_code=status.HTTP_302_FOUND)
def confirm_trip_endpoint(
    db_trip: models.Trip = Depends(get_trip_or_404),
    db: Session = Depends(get_db),
    notifications: NotificationService = Depends(get_notification_service),
):
    redirect_to = build_web_trip_link(db_trip.id)
    if db_trip.is_confirmed:
        return RedirectResponse(redirect_to, status_code=status.HTTP_302_FOUND)

    trip_repo.confirm_trip(db, db_trip)
    guests = participant_repo.get_guests(db, db_trip.id)
    notifications.notify_guests(db_trip, guests)
    logger.info("Trip %s confirmed, %d guest(s) notified", db_trip.id, len(guests))
    return RedirectResponse(redirect_to, status_code=status.HTTP_302_FOUND)
