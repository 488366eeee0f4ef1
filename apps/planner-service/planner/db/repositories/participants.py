"""
Participant repository functions.
"""
from __future__ import annotations

import uuid
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from planner.db import models


def get_participant(db: Session, participant_id: uuid.UUID) -> Optional[models.Participant]:
    return db.query(models.Participant).filter(models.Participant.id == participant_id).first()


def get_participant_by_email(db: Session, trip_id: uuid.UUID, email: str) -> Optional[models.Participant]:
    return (
        db.query(models.Participant)
        .filter(
            models.Participant.trip_id == trip_id,
            func.lower(models.Participant.email) == email.lower(),
        )
        .first()
    )


def get_trip_participants(db: Session, trip_id: uuid.UUID) -> List[models.Participant]:
    """Owner first, then guests by email."""
    return (
        db.query(models.Participant)
        .filter(models.Participant.trip_id == trip_id)
        .order_by(models.Participant.is_owner.desc(), models.Participant.email.asc())
        .all()
    )


def get_guests(db: Session, trip_id: uuid.UUID) -> List[models.Participant]:
    return (
        db.query(models.Participant)
        .filter(models.Participant.trip_id == trip_id, models.Participant.is_owner.is_(False))
        .order_by(models.Participant.email.asc())
        .all()
    )


def create_participant(db: Session, trip_id: uuid.UUID, email: str) -> models.Participant:
    db_participant = models.Participant(trip_id=trip_id, email=email)
    try:
        db.add(db_participant)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_participant)
    return db_participant


def confirm_participant(
    db: Session, db_participant: models.Participant, *, name: Optional[str] = None
) -> models.Participant:
    if name:
        db_participant.name = name
    db_participant.is_confirmed = True
    db.commit()
    db.refresh(db_participant)
    return db_participant
