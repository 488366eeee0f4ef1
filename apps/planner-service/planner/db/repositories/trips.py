"""
Trip repository functions.

Creates a trip together with its owner and invited participants in a single
transaction, and reads/updates trips.
"""
from __future__ import annotations

import uuid
from typing import Iterable, Optional
from sqlalchemy.orm import Session

from planner.db import models, schemas
from planner.utils.dates import as_utc


def _unique_invites(emails: Iterable[str], owner_email: str) -> list[str]:
    """Drop duplicates (case-insensitive) and the owner's own address, keeping order."""
    seen = {owner_email.lower()}
    unique = []
    for email in emails:
        key = email.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(email)
    return unique


def create_trip(db: Session, trip: schemas.TripCreate) -> models.Trip:
    db_trip = models.Trip(
        destination=trip.destination,
        starts_at=as_utc(trip.starts_at),
        ends_at=as_utc(trip.ends_at),
    )
    db_trip.participants.append(
        models.Participant(
            name=trip.owner_name,
            email=trip.owner_email,
            is_owner=True,
            is_confirmed=True,
        )
    )
    for email in _unique_invites(trip.emails_to_invite, trip.owner_email):
        db_trip.participants.append(models.Participant(email=email))
    try:
        db.add(db_trip)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_trip)
    return db_trip


def get_trip(db: Session, trip_id: uuid.UUID) -> Optional[models.Trip]:
    return db.query(models.Trip).filter(models.Trip.id == trip_id).first()


def update_trip(db: Session, trip_id: uuid.UUID, trip: schemas.TripUpdate) -> Optional[models.Trip]:
    db_trip = get_trip(db, trip_id)
    if db_trip:
        db_trip.destination = trip.destination
        db_trip.starts_at = as_utc(trip.starts_at)
        db_trip.ends_at = as_utc(trip.ends_at)
        db.commit()
        db.refresh(db_trip)
    return db_trip


def confirm_trip(db: Session, db_trip: models.Trip) -> models.Trip:
    db_trip.is_confirmed = True
    db.commit()
    db.refresh(db_trip)
    return db_trip
