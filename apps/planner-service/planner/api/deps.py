"""
API dependency helpers.

Resolve path ids into ORM rows (404 when missing) and provide the
notification service to route handlers.
"""
import uuid
from fastapi import Depends
from sqlalchemy.orm import Session

from planner.db import models
from planner.db.database import get_db
from planner.db.repositories import participants as participant_repo
from planner.db.repositories import trips as trip_repo
from planner.errors import ParticipantNotFound, TripNotFound
from planner.services.notification_service import NotificationService


def get_trip_or_404(trip_id: uuid.UUID, db: Session = Depends(get_db)) -> models.Trip:
    db_trip = trip_repo.get_trip(db, trip_id)
    if db_trip is None:
        raise TripNotFound()
    return db_trip


def get_participant_or_404(participant_id: uuid.UUID, db: Session = Depends(get_db)) -> models.Participant:
    db_participant = participant_repo.get_participant(db, participant_id)
    if db_participant is None:
        raise ParticipantNotFound()
    return db_participant


def get_notification_service(db: Session = Depends(get_db)) -> NotificationService:
    return NotificationService(db)
